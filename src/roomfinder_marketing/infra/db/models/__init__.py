from roomfinder_marketing.infra.db.models.base import Base
from roomfinder_marketing.infra.db.models.post import PostRow

__all__ = ["Base", "PostRow"]
