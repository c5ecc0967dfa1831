"""
    프로젝트 단위 복사본 테이블

    프로젝트 생성 시 템플릿(지표 체계, 요소 라이브러리, 수집 도구)을 복사해 두는 테이블들입니다.
    source_id 에는 복사 원본 레코드의 ID가 저장됩니다.
"""

from sqlalchemy import Column, Integer, String, Float, Boolean, Text
from ..base import Base

class ProjectIndicatorSystem(Base):
    """프로젝트 지표 체계 복사본"""
    __tablename__ = "project_indicator_systems"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    source_id = Column(String(64), comment='원본 지표 체계 ID')
    name = Column(String(255), comment='지표 체계 이름')


class ProjectIndicator(Base):
    """프로젝트 지표 복사본"""
    __tablename__ = "project_indicators"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    source_id = Column(String(64), comment='원본 지표 ID')
    parent_id = Column(String(64), comment='상위 지표 ID')
    code = Column(String(50), comment='지표 코드')
    name = Column(String(255), comment='지표 이름')
    level = Column(Integer, comment='계층 깊이')


class ProjectDataIndicator(Base):
    """프로젝트 데이터 지표 복사본"""
    __tablename__ = "project_data_indicators"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    source_id = Column(String(64), comment='원본 데이터 지표 ID')
    indicator_id = Column(String(64), comment='프로젝트 지표 ID')
    code = Column(String(50), comment='데이터 지표 코드')
    name = Column(String(255), comment='데이터 지표 이름')


class ProjectSupportingMaterial(Base):
    """프로젝트 증빙 자료 설정 복사본"""
    __tablename__ = "project_supporting_materials"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    source_id = Column(String(64), comment='원본 증빙 자료 ID')
    indicator_id = Column(String(64), comment='프로젝트 지표 ID')
    name = Column(String(255), comment='자료 이름')
    required = Column(Boolean, default=False, comment='필수 여부')


class ProjectThresholdStandard(Base):
    """프로젝트 기준 복사본"""
    __tablename__ = "project_threshold_standards"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    source_id = Column(String(64), comment='원본 기준 ID')
    indicator_id = Column(String(64), comment='프로젝트 데이터 지표 ID')
    threshold_operator = Column(String(10), comment='비교 연산자')
    threshold_value = Column(Float, comment='기준값')


class ProjectElementLibrary(Base):
    """프로젝트 요소 라이브러리 복사본"""
    __tablename__ = "project_element_libraries"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    source_id = Column(String(64), comment='원본 요소 라이브러리 ID')
    name = Column(String(255), comment='라이브러리 이름')


class ProjectElement(Base):
    """프로젝트 요소 복사본"""
    __tablename__ = "project_elements"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    source_id = Column(String(64), comment='원본 요소 ID')
    library_id = Column(String(64), comment='프로젝트 요소 라이브러리 ID')
    code = Column(String(50), comment='요소 코드')
    name = Column(String(255), comment='요소 이름')
    formula = Column(Text, comment='계산식')


class ProjectDataIndicatorElement(Base):
    """프로젝트 데이터 지표 - 요소 연결 복사본"""
    __tablename__ = "project_data_indicator_elements"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    data_indicator_id = Column(String(64), comment='프로젝트 데이터 지표 ID')
    element_id = Column(String(64), comment='프로젝트 요소 ID')


class ProjectSupportingMaterialElement(Base):
    """프로젝트 증빙 자료 - 요소 연결 복사본"""
    __tablename__ = "project_supporting_material_elements"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    supporting_material_id = Column(String(64), comment='프로젝트 증빙 자료 ID')
    element_id = Column(String(64), comment='프로젝트 요소 ID')


class ProjectDataTool(Base):
    """프로젝트 수집 도구 복사본"""
    __tablename__ = "project_data_tools"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    source_id = Column(String(64), comment='원본 수집 도구 ID')
    name = Column(String(255), comment='도구 이름')
    schema = Column(Text, comment='양식 스키마 (JSON)')


class ProjectFieldMapping(Base):
    """프로젝트 필드 매핑 복사본"""
    __tablename__ = "project_field_mappings"

    id = Column(String(64), primary_key=True, comment='PK')
    project_id = Column(String(64), index=True, comment='프로젝트 ID')
    tool_id = Column(String(64), comment='프로젝트 수집 도구 ID')
    field_id = Column(String(100), comment='양식 필드 ID')
    target_id = Column(String(64), comment='매핑 대상 ID')
