from sqlalchemy import Column, Integer, String, Boolean, Text, TIMESTAMP
from sqlalchemy.sql import func
from ..base import Base

class ComplianceRule(Base):
    """달성 규칙 테이블"""
    __tablename__ = "compliance_rules"

    id = Column(String(64), primary_key=True, comment='PK: 규칙 ID')
    code = Column(String(50), comment='규칙 코드')
    name = Column(String(255), nullable=False, comment='규칙 이름')
    rule_type = Column(String(20), comment='규칙 유형 (threshold, conditional)')
    indicator_id = Column(String(64), comment='데이터 지표 ID (삭제 시 NULL)')
    element_id = Column(String(64), comment='요소 ID (삭제 시 NULL)')
    enabled = Column(Boolean, default=True, comment='활성 여부')
    priority = Column(Integer, default=0, comment='우선순위')

    def __repr__(self):
        return f"<ComplianceRule(id='{self.id}', indicator_id='{self.indicator_id}')>"


class RuleCondition(Base):
    """규칙 조건 테이블"""
    __tablename__ = "rule_conditions"

    id = Column(String(64), primary_key=True, comment='PK: 조건 ID')
    rule_id = Column(String(64), index=True, comment='규칙 ID')
    field = Column(String(100), comment='조건 대상 필드')
    operator = Column(String(10), comment='비교 연산자')
    value = Column(String(255), comment='비교 값')


class RuleAction(Base):
    """규칙 동작 테이블"""
    __tablename__ = "rule_actions"

    id = Column(String(64), primary_key=True, comment='PK: 동작 ID')
    rule_id = Column(String(64), index=True, comment='규칙 ID')
    action_type = Column(String(20), comment='동작 유형 (compare, validate, calculate)')
    config = Column(Text, comment='동작 설정 (JSON)')


class ComplianceResult(Base):
    """달성 판정 결과 테이블"""
    __tablename__ = "compliance_results"

    id = Column(String(64), primary_key=True, comment='PK: 결과 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    rule_id = Column(String(64), index=True, comment='규칙 ID')
    entity_type = Column(String(20), comment='판정 대상 유형 (school, district)')
    entity_id = Column(String(64), comment='판정 대상 ID')
    is_compliant = Column(Integer, comment='달성 여부')
    checked_at = Column(TIMESTAMP, default=func.current_timestamp(), comment='판정 시점')
