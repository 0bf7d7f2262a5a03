from pydantic import BaseModel, ConfigDict


class CustomerProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    phone: str
    address: str = ""
    bikeModel: str = ""
    bikeNumber: str
    kmReading: int = 0
    fuelLevel: str = ""
