"""
Supervision Evaluation Database Package
데이터베이스 연결, 세션 관리, 모델 정의를 담당하는 패키지

테이블 구조 (39개 테이블):
- 지표 체계: IndicatorSystem, Indicator, DataIndicator, SupportingMaterial, ThresholdStandard, DataIndicatorElement
- 요소 / 수집 도구: ElementLibrary, Element, DataTool, FieldMapping
- 구역 / 학교: District, School, DistrictStatistics, SchoolIndicatorData
- 프로젝트: Project, ProjectTool, ProjectPersonnel, ProjectSample, ProjectSampleConfig, ReviewAssignment, ReviewerScope, Task
- 프로젝트 복사본: Project* (지표 체계 / 요소 / 수집 도구 복사본 11개)
- 제출 / 달성 규칙: Submission, SubmissionMaterial, ComplianceRule, RuleCondition, RuleAction, ComplianceResult

이 저장소는 외래키 ON DELETE CASCADE / SET NULL 을 강제하지 않습니다.
참조 무결성은 cascade 패키지의 연쇄 삭제 엔진이 애플리케이션 계층에서 유지합니다.
"""

# 기본 데이터베이스 구성요소
from .base import Base, metadata
from .session import engine, SessionLocal, get_db

# ORM models
from .models import *   # noqa: F401,F403
from .models import __all__ as model_names

__all__ = [
    # 데이터베이스 기본 구성요소
    "Base", 
    "metadata", 
    "engine", 
    "SessionLocal", 
    "get_db",
    
    # 유틸리티 함수들
    "create_tables",
    "get_table_list",
    *model_names,
]

def create_tables():
    """
    모든 테이블을 생성합니다.
    기존 테이블이 있어도 에러가 발생하지 않습니다.
    """
    try:
        Base.metadata.create_all(bind=engine)
        print("✅ 모든 테이블이 성공적으로 생성되었습니다.")
        return True
    except Exception as e:
        print(f"❌ 테이블 생성 중 오류 발생: {e}")
        return False

def get_table_list():
    """
    현재 정의된 모든 테이블 목록을 반환합니다.
    """
    tables = []
    for table_name, table in Base.metadata.tables.items():
        tables.append({
            'name': table_name,
            'columns': len(table.columns),
            'indexes': len(table.indexes)
        })
    return tables

# 개발용 편의 함수
def print_table_info():
    """
    테이블 정보를 보기 좋게 출력합니다.
    """
    tables = get_table_list()
    print("\n📋 평가 데이터베이스 테이블 목록:")
    print("-" * 60)
    print(f"{'테이블명':<40} {'컬럼수':<8} {'인덱스':<8}")
    print("-" * 60)
    
    for table in tables:
        print(f"{table['name']:<40} {table['columns']:<8} {table['indexes']:<8}")
    
    print("-" * 60)
    print(f"총 {len(tables)}개 테이블")

# 스크립트로 직접 실행될 때
if __name__ == "__main__":
    print("Supervision Evaluation Database Management")
    print_table_info()
