"""全局常量"""

# 版本信息
VERSION = "0.3.0"
APP_NAME = "Blog Domain Core"

# 文章
MAX_TITLE_LENGTH = 90
DEFAULT_TITLE = ""

# 评论
MAX_COMMENT_LENGTH = 1000

# 标签
MAX_TAG_LENGTH = 50
MAX_TAGS_PER_POST = 10

# 仓储
DEFAULT_POST_ID_START = 1

# 日志
LOG_DIR_NAME = ".blog_domain"
LOG_FILE_NAME = "blog_domain.log"
