from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, CheckConstraint, Index, text
from datetime import datetime

from constants import FieldLimits
from database import Base


class Area(Base):
    """
    Organisational area that personas belong to.

    Rows are soft-deleted: deleted_at is set instead of removing the row, and
    the partial unique index only covers active rows, so a deleted area's
    name can be reused.
    """
    __tablename__ = 'areas'

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(FieldLimits.AREA_NAME_MAX), nullable=False)
    descripcion = Column(Text, nullable=False, default='')
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (
        CheckConstraint("nombre != ''", name='ck_areas_nombre_not_empty'),
        Index(
            'uq_areas_nombre_active', 'nombre',
            unique=True,
            postgresql_where=text('deleted_at IS NULL'),
            sqlite_where=text('deleted_at IS NULL'),
        ),
        Index('idx_areas_deleted_at', 'deleted_at'),
    )


class Persona(Base):
    """
    A registered person. Every persona references exactly one area.

    Email uniqueness is enforced among active rows by a partial unique index.
    """
    __tablename__ = 'personas'

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(FieldLimits.PERSON_NAME_MAX), nullable=False)
    email = Column(String(FieldLimits.EMAIL_MAX), nullable=False)
    area_id = Column(Integer, ForeignKey('areas.id'), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (
        CheckConstraint("nombre != ''", name='ck_personas_nombre_not_empty'),
        Index(
            'uq_personas_email_active', 'email',
            unique=True,
            postgresql_where=text('deleted_at IS NULL'),
            sqlite_where=text('deleted_at IS NULL'),
        ),
        Index('idx_personas_area_id', 'area_id'),
        Index('idx_personas_deleted_at', 'deleted_at'),
    )
