from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base


class ResourceType(Base):
    __tablename__ = "tipo_recurso"

    id     = Column(Integer, primary_key=True, index=True)
    nombre = Column("nombre_tipo", String(50), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    resources = relationship("Resource", back_populates="tipoRecurso")

    def __repr__(self):
        return f"<ResourceType id={self.id} nombre={self.nombre}>"
