"""
Post模型 - 文章表
"""
# 标准库导包
import uuid
from datetime import datetime
from typing import Optional

# 第三方库导包
from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

# 项目内部导包
from storage.database import Base


class Post(Base):
    """文章表"""

    __tablename__ = "posts"

    # 核心字段
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title: Mapped[str] = mapped_column(String(200), nullable=False, comment="标题")
    content: Mapped[str] = mapped_column(Text, nullable=False, default="", comment="正文")
    cover_image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True, comment="封面图URL，不做格式校验")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # 关系定义
    post_categories: Mapped[list["PostCategory"]] = relationship(
        "PostCategory",
        back_populates="post",
        order_by="PostCategory.created_at"
    )

    @property
    def categories(self) -> list:
        """已加载的分类列表"""
        return [pc.category for pc in self.post_categories if pc.category]

    def __repr__(self):
        return f"<Post(id={self.id}, title={self.title})>"
