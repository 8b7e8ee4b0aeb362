from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base


class VehicleType(Base):
    __tablename__ = "tipo_vehiculo"

    id     = Column(Integer, primary_key=True, index=True)
    nombre = Column("nombre_tipo", String(50), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    vehicles = relationship("Vehicle", back_populates="tipoVehiculo")

    def __repr__(self):
        return f"<VehicleType id={self.id} nombre={self.nombre}>"
