"""
Supervision Evaluation Database Models Package
평가 프로젝트 관련 테이블 구조에 맞춘 데이터베이스 모델들을 정의하는 패키지
"""

# 지표 체계 모델들
from .indicator import (
    IndicatorSystem,
    Indicator,
    DataIndicator,
    SupportingMaterial,
    ThresholdStandard,
    DataIndicatorElement
)

# 요소 / 수집 도구 모델들
from .element import ElementLibrary, Element
from .tool import DataTool, FieldMapping

# 구역 / 학교 모델들
from .region import District, School, DistrictStatistics, SchoolIndicatorData

# 프로젝트 모델들
from .project import (
    Project,
    ProjectTool,
    ProjectPersonnel,
    ProjectSample,
    ProjectSampleConfig,
    ReviewAssignment,
    ReviewerScope,
    Task
)
from .project_copy import (
    ProjectIndicatorSystem,
    ProjectIndicator,
    ProjectDataIndicator,
    ProjectSupportingMaterial,
    ProjectThresholdStandard,
    ProjectElementLibrary,
    ProjectElement,
    ProjectDataIndicatorElement,
    ProjectSupportingMaterialElement,
    ProjectDataTool,
    ProjectFieldMapping
)

# 제출 / 달성 규칙 모델들
from .submission import Submission, SubmissionMaterial
from .compliance import ComplianceRule, RuleCondition, RuleAction, ComplianceResult

__all__ = [
    # 지표 체계 모델들
    "IndicatorSystem",
    "Indicator",
    "DataIndicator",
    "SupportingMaterial",
    "ThresholdStandard",
    "DataIndicatorElement",

    # 요소 / 수집 도구 모델들
    "ElementLibrary",
    "Element",
    "DataTool",
    "FieldMapping",

    # 구역 / 학교 모델들
    "District",
    "School",
    "DistrictStatistics",
    "SchoolIndicatorData",

    # 프로젝트 모델들
    "Project",
    "ProjectTool",
    "ProjectPersonnel",
    "ProjectSample",
    "ProjectSampleConfig",
    "ReviewAssignment",
    "ReviewerScope",
    "Task",
    "ProjectIndicatorSystem",
    "ProjectIndicator",
    "ProjectDataIndicator",
    "ProjectSupportingMaterial",
    "ProjectThresholdStandard",
    "ProjectElementLibrary",
    "ProjectElement",
    "ProjectDataIndicatorElement",
    "ProjectSupportingMaterialElement",
    "ProjectDataTool",
    "ProjectFieldMapping",

    # 제출 / 달성 규칙 모델들
    "Submission",
    "SubmissionMaterial",
    "ComplianceRule",
    "RuleCondition",
    "RuleAction",
    "ComplianceResult",
]
