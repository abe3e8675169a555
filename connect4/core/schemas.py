from pydantic import BaseModel, Field


class MoveRequest(BaseModel):
    position: str = Field(default="", description="Move history, e.g. 'B3R3B2R4'.")
    # Range is checked by best_move so the caller gets a DepthOutOfRangeError
    level: int = Field(description="Search depth in plies (1-15).")


class MoveResponse(BaseModel):
    column: int = Field(description="Column index (0-6).")
