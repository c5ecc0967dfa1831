from sqlalchemy import Column, Integer, String, Float, Text, TIMESTAMP
from sqlalchemy.sql import func
from ..base import Base

class District(Base):
    """구/현 (행정 구역) 테이블"""
    __tablename__ = "districts"

    id = Column(String(64), primary_key=True, comment='PK: 구역 ID')
    name = Column(String(100), nullable=False, comment='구역 이름')
    code = Column(String(20), comment='구역 코드')
    level = Column(String(20), comment='행정 단계')
    parent_id = Column(String(64), comment='상위 구역 ID')
    created_at = Column(TIMESTAMP, default=func.current_timestamp(), comment='기록 생성 시점')


class School(Base):
    """학교 테이블"""
    __tablename__ = "schools"

    id = Column(String(64), primary_key=True, comment='PK: 학교 ID')
    district_id = Column(String(64), index=True, comment='구역 ID')
    name = Column(String(255), nullable=False, comment='학교 이름')
    type = Column(String(50), comment='학교 유형 (초등, 중등, 9년 일관제)')
    category = Column(String(20), comment='설립 구분 (공립, 사립)')
    urban_rural = Column(String(20), comment='도시/농촌 구분')
    student_count = Column(Integer, comment='학생 수')
    teacher_count = Column(Integer, comment='교사 수')

    def __repr__(self):
        return f"<School(id='{self.id}', name='{self.name}')>"


class DistrictStatistics(Base):
    """구역별 통계 테이블"""
    __tablename__ = "district_statistics"

    id = Column(String(64), primary_key=True, comment='PK: 통계 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    district_id = Column(String(64), index=True, comment='구역 ID')
    school_type = Column(String(50), comment='학교 유형')
    statistics = Column(Text, comment='집계 결과 (JSON)')


class SchoolIndicatorData(Base):
    """학교별 데이터 지표 값 테이블"""
    __tablename__ = "school_indicator_data"

    id = Column(String(64), primary_key=True, comment='PK: 지표 값 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    school_id = Column(String(64), index=True, comment='학교 ID')
    data_indicator_id = Column(String(64), index=True, comment='데이터 지표 ID')
    value = Column(Float, comment='지표 값')
    is_compliant = Column(Integer, comment='달성 여부')
