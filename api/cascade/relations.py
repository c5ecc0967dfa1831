"""
    연쇄 삭제 관계 선언

    저장소가 외래키 ON DELETE CASCADE / SET NULL 을 강제하지 않으므로, 삭제 시 함께 정리해야 할 관계를
    여기에 데이터로 선언합니다. 새 관계를 추가할 때는 아래 표에 한 줄만 추가하면 되며,
    삭제 순서는 SchemaGraph 가 기동 시 자동으로 계산합니다.

    CASCADE_RELATIONS
        key: 부모 테이블
        value: (자식 테이블, 외래키 필드, 전이 여부)
        전이 여부가 True 이면 자식 테이블의 연쇄 관계도 계속 따라가고,
        False 이면 직계 자식 레코드만 삭제합니다.

    SET_NULL_RELATIONS
        key: 삭제되는 테이블
        value: (참조 테이블, 외래키 필드)
        참조 레코드는 삭제하지 않고 외래키만 NULL 로 변경합니다.
"""

CASCADE_RELATIONS = {
    "indicator_systems": [
        ("indicators", "system_id", True),
    ],
    "indicators": [
        ("indicators", "parent_id", True),  # 자기 참조: 하위 지표 재귀 삭제
        ("data_indicators", "indicator_id", True),
        ("supporting_materials", "indicator_id", False),
    ],
    "data_indicators": [
        ("data_indicator_elements", "data_indicator_id", False),
        ("threshold_standards", "indicator_id", False),
        ("school_indicator_data", "data_indicator_id", False),
    ],
    "element_libraries": [
        ("elements", "library_id", True),
    ],
    "elements": [
        ("data_indicator_elements", "element_id", False),
    ],
    "data_tools": [
        ("field_mappings", "tool_id", False),
        ("project_tools", "tool_id", False),
    ],
    "projects": [
        # 제출 데이터 (submission_materials 까지 연쇄)
        ("submissions", "project_id", True),
        # 심사
        ("review_assignments", "project_id", False),
        ("reviewer_scopes", "project_id", False),
        # 과제
        ("tasks", "project_id", False),
        # 통계 / 달성 판정
        ("school_indicator_data", "project_id", False),
        ("district_statistics", "project_id", False),
        ("compliance_results", "project_id", False),
        # 프로젝트 설정
        ("project_tools", "project_id", False),
        ("project_personnel", "project_id", False),
        ("project_samples", "project_id", False),
        ("project_sample_config", "project_id", False),
        # 프로젝트 복사본
        ("project_field_mappings", "project_id", False),
        ("project_data_indicator_elements", "project_id", False),
        ("project_supporting_material_elements", "project_id", False),
        ("project_threshold_standards", "project_id", False),
        ("project_data_indicators", "project_id", False),
        ("project_supporting_materials", "project_id", False),
        ("project_indicators", "project_id", False),
        ("project_elements", "project_id", False),
        ("project_element_libraries", "project_id", False),
        ("project_data_tools", "project_id", False),
        ("project_indicator_systems", "project_id", False),
    ],
    "submissions": [
        ("submission_materials", "submission_id", False),
    ],
    "districts": [
        ("schools", "district_id", True),
        ("district_statistics", "district_id", False),
    ],
    "schools": [
        ("school_indicator_data", "school_id", False),
    ],
    "compliance_rules": [
        ("rule_conditions", "rule_id", False),
        ("rule_actions", "rule_id", False),
        ("compliance_results", "rule_id", False),
    ],
}

SET_NULL_RELATIONS = {
    "data_indicators": [
        ("compliance_rules", "indicator_id"),
        ("submission_materials", "indicator_id"),
    ],
    "elements": [
        ("compliance_rules", "element_id"),
    ],
    "supporting_materials": [
        ("submission_materials", "material_config_id"),
    ],
}

# 명명된 삭제 진입점이 제공되는 최상위 테이블
ROOT_TABLES = (
    "projects",
    "indicator_systems",
    "indicators",
    "schools",
    "districts",
    "data_tools",
    "element_libraries",
    "compliance_rules",
)

# 사용자 표시용 테이블 이름
TABLE_DISPLAY_NAMES = {
    "projects": "평가 프로젝트",
    "indicator_systems": "지표 체계",
    "indicators": "지표",
    "data_indicators": "데이터 지표",
    "supporting_materials": "증빙 자료 설정",
    "threshold_standards": "데이터 지표 기준",
    "data_indicator_elements": "데이터 지표-요소 연결",
    "element_libraries": "요소 라이브러리",
    "elements": "요소",
    "data_tools": "수집 도구",
    "field_mappings": "필드 매핑",
    "districts": "구역",
    "schools": "학교",
    "district_statistics": "구역 통계",
    "school_indicator_data": "학교 지표 값",
    "submissions": "제출 자료",
    "submission_materials": "제출 첨부 자료",
    "compliance_rules": "달성 규칙",
    "rule_conditions": "규칙 조건",
    "rule_actions": "규칙 동작",
    "compliance_results": "달성 판정 결과",
}


def get_table_display_name(table_name: str) -> str:
    """
    테이블명을 사용자 친화적인 이름으로 변환

    Args:
        table_name: 데이터베이스 테이블명

    Returns:
        str: 사용자 친화적인 이름 (등록되지 않은 테이블은 테이블명 그대로)
    """
    return TABLE_DISPLAY_NAMES.get(table_name, table_name)
