from sqlalchemy import Column, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from ..base import Base

class DataTool(Base):
    """데이터 수집 도구 (양식/설문) 테이블"""
    __tablename__ = "data_tools"

    id = Column(String(64), primary_key=True, comment='PK: 수집 도구 ID')
    name = Column(String(255), nullable=False, comment='도구 이름')
    type = Column(String(20), comment='도구 유형 (양식, 설문)')
    target = Column(String(50), comment='수집 대상')
    status = Column(String(20), default='draft', comment='상태')
    schema = Column(Text, comment='양식 스키마 (JSON)')
    created_at = Column(TIMESTAMP, default=func.current_timestamp(), comment='기록 생성 시점')


class FieldMapping(Base):
    """양식 필드 - 요소 매핑 테이블"""
    __tablename__ = "field_mappings"

    id = Column(String(64), primary_key=True, comment='PK: 매핑 ID')
    tool_id = Column(String(64), index=True, comment='수집 도구 ID')
    field_id = Column(String(100), comment='양식 필드 ID')
    mapping_type = Column(String(20), comment='매핑 유형 (data_indicator, element)')
    target_id = Column(String(64), comment='매핑 대상 ID')
