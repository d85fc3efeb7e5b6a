"""博客领域核心

管理文章（Post）、作者（Author）、评论（Comment）、评论者（Commenter）与标签（Tag），
在与存储技术无关的前提下维护业务不变量。

架构：
- 领域驱动设计 (DDD) + 六边形架构 (Hexagonal Architecture)
- 每个用例一个类、一个公开方法（execute）
- 仓储以 Protocol 端口定义，基础设施层提供适配器

使用方式：
    from blog_domain.infrastructure.config import get_container

    container = get_container()
    post_id = container.add_post_use_case.execute(author_id=1)
    container.update_title_use_case.execute(post_id, "  Hello World  ")
"""

from .shared.constants import APP_NAME, VERSION

__version__ = VERSION
__app_name__ = APP_NAME

__all__ = ["__version__", "__app_name__"]
