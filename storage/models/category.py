"""
Category模型 - 分类表
"""
# 标准库导包
import uuid
from datetime import datetime

# 第三方库导包
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

# 项目内部导包
from storage.database import Base


class Category(Base):
    """分类表"""

    __tablename__ = "categories"

    # 核心字段
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, comment="分类名称")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # 关系定义（不级联删除，删除被引用的分类由服务层拒绝）
    post_categories: Mapped[list["PostCategory"]] = relationship("PostCategory", back_populates="category")

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"
