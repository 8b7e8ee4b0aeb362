from sqlalchemy import Column, Integer, BigInteger, String
from sqlalchemy.orm import relationship
from app.database import Base


class Firefighter(Base):
    """
    Requester of resources. Owned by the personnel service; this table only
    mirrors what resource requests need to reference and validate.
    """
    __tablename__ = "bombero"

    id       = Column(Integer, primary_key=True, index=True)
    nombre   = Column(String(50), nullable=False)
    aPaterno = Column("a_paterno", String(50), nullable=False)
    aMaterno = Column("a_materno", String(50), nullable=False)
    telefono = Column(BigInteger, unique=True, nullable=False, index=True)

    # ─── Relationships ─────────────────────────────────────────────────────────
    requests = relationship("ResourceRequest", back_populates="bombero")

    def __repr__(self):
        return f"<Firefighter id={self.id} nombre={self.nombre} telefono={self.telefono}>"
