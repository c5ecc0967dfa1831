from sqlalchemy import Column, Integer, String, Text, Float, Boolean, TIMESTAMP
from sqlalchemy.sql import func
from ..base import Base

class IndicatorSystem(Base):
    """지표 체계 테이블"""
    __tablename__ = "indicator_systems"

    id = Column(String(64), primary_key=True, comment='PK: 지표 체계 ID')
    name = Column(String(255), nullable=False, comment='지표 체계 이름')
    type = Column(String(50), comment='체계 유형 (달성형, 점수형)')
    target = Column(String(50), comment='평가 대상 (의무교육, 유아교육)')
    status = Column(String(20), default='draft', comment='상태 (draft, published)')
    indicator_count = Column(Integer, default=0, comment='지표 수')
    created_at = Column(TIMESTAMP, default=func.current_timestamp(), comment='기록 생성 시점')

    def __repr__(self):
        return f"<IndicatorSystem(id='{self.id}', name='{self.name}')>"


class Indicator(Base):
    """지표 테이블 (parent_id 자기 참조로 계층 구성)"""
    __tablename__ = "indicators"

    id = Column(String(64), primary_key=True, comment='PK: 지표 ID')
    system_id = Column(String(64), index=True, comment='지표 체계 ID')
    parent_id = Column(String(64), index=True, comment='상위 지표 ID (최상위는 NULL)')
    code = Column(String(50), comment='지표 코드')
    name = Column(String(255), nullable=False, comment='지표 이름')
    level = Column(Integer, default=1, comment='계층 깊이')
    is_leaf = Column(Boolean, default=False, comment='말단 지표 여부')
    sort_order = Column(Integer, default=0, comment='정렬 순서')

    def __repr__(self):
        return f"<Indicator(id='{self.id}', code='{self.code}', parent_id='{self.parent_id}')>"


class DataIndicator(Base):
    """데이터 지표 테이블"""
    __tablename__ = "data_indicators"

    id = Column(String(64), primary_key=True, comment='PK: 데이터 지표 ID')
    indicator_id = Column(String(64), index=True, comment='지표 ID')
    code = Column(String(50), comment='데이터 지표 코드')
    name = Column(String(255), nullable=False, comment='데이터 지표 이름')
    threshold = Column(String(100), comment='기준값 표현식')
    description = Column(Text, comment='설명')


class SupportingMaterial(Base):
    """증빙 자료 설정 테이블"""
    __tablename__ = "supporting_materials"

    id = Column(String(64), primary_key=True, comment='PK: 증빙 자료 ID')
    indicator_id = Column(String(64), index=True, comment='지표 ID')
    name = Column(String(255), nullable=False, comment='자료 이름')
    file_types = Column(String(100), comment='허용 파일 형식')
    max_size = Column(String(20), comment='최대 파일 크기')
    required = Column(Boolean, default=False, comment='필수 여부')


class ThresholdStandard(Base):
    """데이터 지표 기준 테이블"""
    __tablename__ = "threshold_standards"

    id = Column(String(64), primary_key=True, comment='PK: 기준 ID')
    indicator_id = Column(String(64), index=True, comment='데이터 지표 ID')
    institution_type = Column(String(50), comment='기관 유형')
    threshold_operator = Column(String(10), comment='비교 연산자')
    threshold_value = Column(Float, comment='기준값')


class DataIndicatorElement(Base):
    """데이터 지표 - 요소 연결 테이블"""
    __tablename__ = "data_indicator_elements"

    id = Column(String(64), primary_key=True, comment='PK: 연결 ID')
    data_indicator_id = Column(String(64), index=True, comment='데이터 지표 ID')
    element_id = Column(String(64), index=True, comment='요소 ID')
    mapping_type = Column(String(20), comment='연결 유형 (primary, reference)')
