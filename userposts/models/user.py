from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from userposts.core.database import Base
from userposts.models.post import Post

class User(Base):
    __tablename__ = 'users'
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True)
    birth_date = Column(Date)
    posts = relationship(Post, back_populates="user")

    def __repr__(self):
        return f"User(id={self.id!r}, name={self.name!r}, birth_date={self.birth_date!r})"
