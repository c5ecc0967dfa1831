from sqlalchemy import Column, BigInteger, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from ..base import Base

class Submission(Base):
    """자료 제출 테이블"""
    __tablename__ = "submissions"

    id = Column(String(64), primary_key=True, comment='PK: 제출 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    form_id = Column(String(64), comment='수집 도구 ID')
    school_id = Column(String(64), comment='학교 ID')
    submitter_name = Column(String(50), comment='제출자 이름')
    status = Column(String(20), comment='제출 상태 (draft, submitted, approved, rejected)')
    data = Column(Text, comment='제출 데이터 (JSON)')
    created_at = Column(TIMESTAMP, default=func.current_timestamp(), comment='기록 생성 시점')


class SubmissionMaterial(Base):
    """제출 첨부 자료 테이블"""
    __tablename__ = "submission_materials"

    id = Column(String(64), primary_key=True, comment='PK: 첨부 자료 ID')
    submission_id = Column(String(64), index=True, comment='제출 ID')
    indicator_id = Column(String(64), comment='데이터 지표 ID')
    material_config_id = Column(String(64), comment='증빙 자료 설정 ID')
    file_name = Column(String(255), comment='파일 이름')
    file_path = Column(String(500), comment='저장 경로')
    file_size = Column(BigInteger, comment='파일 크기 (byte)')
