from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, PlainSerializer

# Fixed-point in storage, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class MessageResponse(BaseModel):
    message: str
