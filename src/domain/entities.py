from pydantic import BaseModel, Field

# --- Users ---

class User(BaseModel):
    id: int = Field(ge=0)
    name: str
    email: str
