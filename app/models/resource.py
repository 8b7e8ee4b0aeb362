from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class Resource(Base):
    __tablename__ = "recurso"

    id            = Column(Integer, primary_key=True, index=True)
    nombre        = Column(String(50), nullable=False)
    cantidad      = Column(Integer, nullable=False)
    estado        = Column(String(50), nullable=False)
    tipoRecursoId = Column("tipo_recurso_id", Integer, ForeignKey("tipo_recurso.id"), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    tipoRecurso = relationship("ResourceType", back_populates="resources")
    requests    = relationship("ResourceRequest", back_populates="recurso")

    def __repr__(self):
        return f"<Resource id={self.id} nombre={self.nombre} cantidad={self.cantidad} estado={self.estado}>"
