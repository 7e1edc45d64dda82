from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from userposts.core.database import Base

class Post(Base):
    __tablename__ = 'posts'
    id = Column(Integer, primary_key=True, index=True)
    description = Column(String)
    user_id = Column(Integer, ForeignKey('users.id'))
    user = relationship("User", back_populates="posts")

    def __repr__(self):
        return f"Post(id={self.id!r}, description={self.description!r})"
