from sqlalchemy import Column, Integer, String, Boolean, Text, TIMESTAMP
from sqlalchemy.sql import func
from ..base import Base

class Project(Base):
    """평가 프로젝트 테이블"""
    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, comment='PK: 프로젝트 ID')
    name = Column(String(255), nullable=False, comment='프로젝트 이름')
    indicator_system_id = Column(String(64), comment='지표 체계 ID')
    status = Column(String(20), comment='진행 상태 (설정중, 제출중, 심사중)')
    is_published = Column(Boolean, default=False, comment='공개 여부')
    year = Column(Integer, comment='평가 연도')
    created_at = Column(TIMESTAMP, default=func.current_timestamp(), comment='기록 생성 시점')

    def __repr__(self):
        return f"<Project(id='{self.id}', name='{self.name}')>"


class ProjectTool(Base):
    """프로젝트 - 수집 도구 연결 테이블"""
    __tablename__ = "project_tools"

    id = Column(String(64), primary_key=True, comment='PK: 연결 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    tool_id = Column(String(64), index=True, comment='수집 도구 ID')
    sort_order = Column(Integer, default=0, comment='정렬 순서')
    is_required = Column(Boolean, default=True, comment='필수 여부')


class ProjectPersonnel(Base):
    """프로젝트 참여 인원 테이블"""
    __tablename__ = "project_personnel"

    id = Column(String(64), primary_key=True, comment='PK: 인원 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    name = Column(String(50), comment='이름')
    role = Column(String(50), comment='역할')
    phone = Column(String(30), comment='연락처')


class ProjectSample(Base):
    """프로젝트 표본 테이블"""
    __tablename__ = "project_samples"

    id = Column(String(64), primary_key=True, comment='PK: 표본 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    parent_id = Column(String(64), comment='상위 표본 ID')
    type = Column(String(20), comment='표본 유형 (구역, 학교, 교사)')
    name = Column(String(255), comment='표본 이름')


class ProjectSampleConfig(Base):
    """프로젝트 표본 설정 테이블"""
    __tablename__ = "project_sample_config"

    id = Column(String(64), primary_key=True, comment='PK: 설정 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    config = Column(Text, comment='표본 설정 (JSON)')


class ReviewAssignment(Base):
    """심사 배정 테이블"""
    __tablename__ = "review_assignments"

    id = Column(String(64), primary_key=True, comment='PK: 배정 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    submission_id = Column(String(64), comment='제출 ID')
    reviewer_id = Column(String(64), comment='심사자 ID')
    status = Column(String(20), comment='심사 상태')


class ReviewerScope(Base):
    """심사자 담당 범위 테이블"""
    __tablename__ = "reviewer_scopes"

    id = Column(String(64), primary_key=True, comment='PK: 범위 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    reviewer_id = Column(String(64), comment='심사자 ID')
    scope_type = Column(String(20), comment='범위 유형 (구역, 도구)')
    scope_id = Column(String(64), comment='범위 대상 ID')


class Task(Base):
    """제출 과제 테이블"""
    __tablename__ = "tasks"

    id = Column(String(64), primary_key=True, comment='PK: 과제 ID')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    tool_id = Column(String(64), comment='수집 도구 ID')
    assignee_id = Column(String(64), comment='담당자 ID')
    status = Column(String(20), comment='과제 상태')
