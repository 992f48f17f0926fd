"""
PostCategory模型 - 文章分类关联表
"""
# 标准库导包
import uuid
from datetime import datetime

# 第三方库导包
from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

# 项目内部导包
from storage.database import Base


class PostCategory(Base):
    """文章分类关联表"""

    __tablename__ = "post_categories"

    # 核心字段
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    post_id: Mapped[str] = mapped_column(String(36), ForeignKey("posts.id"), nullable=False, index=True)
    category_id: Mapped[str] = mapped_column(String(36), ForeignKey("categories.id"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    # 关系定义
    post: Mapped["Post"] = relationship("Post", back_populates="post_categories")
    category: Mapped["Category"] = relationship("Category", back_populates="post_categories")

    # 唯一索引
    __table_args__ = (
        UniqueConstraint("post_id", "category_id", name="uq_post_category"),
    )

    def __repr__(self):
        return f"<PostCategory(id={self.id}, post_id={self.post_id}, category_id={self.category_id})>"
