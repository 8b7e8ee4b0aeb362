from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class Vehicle(Base):
    __tablename__ = "vehiculo"

    id             = Column(Integer, primary_key=True, index=True)
    marca          = Column(String(50), nullable=False)
    modelo         = Column(String(50), nullable=False)
    patente        = Column(String(6), unique=True, nullable=False, index=True)
    conductor      = Column(String(50), nullable=False)
    estado         = Column(String(50), nullable=False)
    tipoVehiculoId = Column("tipo_vehiculo_id", Integer, ForeignKey("tipo_vehiculo.id"), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    tipoVehiculo = relationship("VehicleType", back_populates="vehicles")

    def __repr__(self):
        return f"<Vehicle id={self.id} patente={self.patente}>"
