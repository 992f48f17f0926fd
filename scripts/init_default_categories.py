"""
初始化默认分类的脚本
"""
# 标准库导包
import asyncio
import sys
import traceback
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# 项目内部导包
from storage import UnitOfWork, async_session_factory, cleanup_db


# 默认分类
DEFAULT_CATEGORIES = [
    "お知らせ",
    "技術",
    "日記",
]


async def init_default_categories():
    """初始化默认分类，已存在的跳过"""
    print("开始初始化默认分类...")

    try:
        created_count = 0
        skipped_count = 0

        async with UnitOfWork(async_session_factory) as uow:
            for name in DEFAULT_CATEGORIES:
                if await uow.categories.get_by_name(name):
                    print(f"  - 跳过已存在的分类: {name}")
                    skipped_count += 1
                    continue

                category = await uow.categories.create(name=name)
                print(f"  ✓ 创建分类: {category.name} (ID: {category.id})")
                created_count += 1

        print(f"\n完成！创建了 {created_count} 个分类，跳过了 {skipped_count} 个已存在的分类。")
        return 0

    except Exception as e:
        print(f"✗ 初始化失败: {str(e)}")
        traceback.print_exc()
        return 1


async def main():
    """主函数"""
    try:
        return await init_default_categories()
    finally:
        # 清理数据库连接
        await cleanup_db()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
