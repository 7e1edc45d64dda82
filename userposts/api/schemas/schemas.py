from pydantic import BaseModel, Field
from typing import Optional, Dict
from datetime import date, datetime


class Link(BaseModel):
    href: str


class UserBase(BaseModel):
    name: str
    birth_date: date = Field(alias="birthDate")

    class Config:
        populate_by_name = True

class UserCreate(UserBase):
    id: Optional[int] = None

class UserResponse(UserBase):
    id: int

    class Config:
        from_attributes = True
        populate_by_name = True

class UserModel(UserResponse):
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")


class PostCreate(BaseModel):
    id: Optional[int] = None
    description: Optional[str] = None

# never carries the owning user
class PostResponse(BaseModel):
    id: int
    description: Optional[str] = None

    class Config:
        from_attributes = True


class ExceptionResponse(BaseModel):
    time_stamp: datetime = Field(alias="timeStamp")
    message: str
    details: str

    class Config:
        populate_by_name = True
