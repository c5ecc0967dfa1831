from sqlalchemy import Column, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from ..base import Base

class ElementLibrary(Base):
    """요소 라이브러리 테이블"""
    __tablename__ = "element_libraries"

    id = Column(String(64), primary_key=True, comment='PK: 요소 라이브러리 ID')
    name = Column(String(255), nullable=False, comment='라이브러리 이름')
    description = Column(Text, comment='설명')
    status = Column(String(20), default='draft', comment='상태')
    created_at = Column(TIMESTAMP, default=func.current_timestamp(), comment='기록 생성 시점')


class Element(Base):
    """요소 테이블"""
    __tablename__ = "elements"

    id = Column(String(64), primary_key=True, comment='PK: 요소 ID')
    library_id = Column(String(64), index=True, comment='요소 라이브러리 ID')
    code = Column(String(50), comment='요소 코드')
    name = Column(String(255), nullable=False, comment='요소 이름')
    element_type = Column(String(20), comment='요소 유형 (기초, 파생)')
    data_type = Column(String(20), comment='데이터 유형')
    formula = Column(Text, comment='파생 요소 계산식')

    def __repr__(self):
        return f"<Element(id='{self.id}', code='{self.code}')>"
