#!/usr/bin/env python3
"""
테이블 데이터 초기화 스크립트
연쇄 삭제 그래프에서 계산한 삭제 순서(자식 테이블 우선)로 모든 평가 테이블의 데이터를 삭제합니다.
"""

import os
from typing import Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from cascade.graph import get_schema_graph
from db.base import Base
from db.session import SessionLocal

def clear_all_tables(db: Optional[Session] = None) -> Dict[str, int]:
    """삭제 순서대로 모든 테이블 데이터 삭제 후 테이블별 삭제 건수 반환"""
    
    print("🗑️ 테이블 데이터 초기화 시작!")
    print("=" * 50)
    
    owns_session = db is None
    if owns_session:
        db = SessionLocal()
    
    deleted: Dict[str, int] = {}
    
    try:
        # 자식 테이블 → 부모 테이블 순서
        for table_name in get_schema_graph().deletion_order:
            table = Base.metadata.tables.get(table_name)
            
            if table is None:
                print(f"   ⚠️ {table_name} 모델이 정의되어 있지 않아 건너뜁니다.")
                continue
            
            count_before = db.execute(select(func.count()).select_from(table)).scalar()
            
            if count_before > 0:
                result = db.execute(table.delete())
                deleted[table_name] = result.rowcount
                print(f"🧹 {table_name}: {result.rowcount}개 삭제됨")
            else:
                print(f"   ✅ {table_name} 테이블 이미 비어있음")
        
        db.commit()
        
        print("\n" + "=" * 50)
        print("🎯 테이블 초기화 완료!")
        print(f"📊 총 삭제된 레코드: {sum(deleted.values())}개")
        
        return deleted
        
    except Exception as e:
        print(f"❌ 테이블 초기화 실패: {e}")
        db.rollback()
        raise e
        
    finally:
        if owns_session:
            db.close()

def main():
    print("🔥 테이블 데이터 초기화 도구")
    print("⚠️ 이 작업은 모든 평가 테이블의 데이터를 삭제합니다!")
    print()
    
    # 환경변수 확인
    if not os.getenv("DATABASE_URL"):
        required_env = ['DB_HOST', 'DB_PORT', 'DB_USER', 'DB_PASSWORD', 'DB_NAME']
        missing_env = [env for env in required_env if not os.getenv(env)]
        
        if missing_env:
            print(f"❌ 필수 환경변수가 설정되지 않았습니다: {missing_env}")
            print("DATABASE_URL 또는 DB_* 환경변수를 설정하고 다시 실행하세요.")
            return
    
    print("✅ 환경변수 확인 완료")
    
    # 사용자 확인
    print("\n" + "=" * 50)
    print("⚠️ 경고: 이 작업은 되돌릴 수 없습니다!")
    print("모든 테이블의 데이터가 영구적으로 삭제됩니다.")
    
    response = input("\n계속하시겠습니까? (y/N): ").strip().lower()
    
    if response in ['y', 'yes']:
        clear_all_tables()
    else:
        print("❌ 작업이 취소되었습니다.")

if __name__ == "__main__":
    main()
