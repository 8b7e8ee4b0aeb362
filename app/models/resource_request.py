from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class ResourceRequest(Base):
    __tablename__ = "solicitud_recurso"

    id        = Column(Integer, primary_key=True, index=True)
    titulo    = Column(String(50), nullable=False)
    detalle   = Column(String(400), nullable=False)
    estado    = Column(String(50), nullable=False)
    bomberoId = Column("bombero_id", Integer, ForeignKey("bombero.id"), nullable=False)
    recursoId = Column("recurso_id", Integer, ForeignKey("recurso.id"), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    bombero = relationship("Firefighter", back_populates="requests")
    recurso = relationship("Resource", back_populates="requests")

    def __repr__(self):
        return f"<ResourceRequest id={self.id} titulo={self.titulo} estado={self.estado}>"
