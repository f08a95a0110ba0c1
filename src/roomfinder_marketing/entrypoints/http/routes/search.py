from fastapi import APIRouter, Depends, Query

from roomfinder_marketing.domain.post import PostFilters
from roomfinder_marketing.entrypoints.http.dependencies import get_list_posts_use_case
from roomfinder_marketing.entrypoints.http.dtos.posts import PostPageDTO
from roomfinder_marketing.entrypoints.http.envelope import ApiResponse
from roomfinder_marketing.entrypoints.http.mappers.post_mapper import PostMapper
from roomfinder_marketing.use_cases.list_posts import ListPosts

router = APIRouter(prefix="/search", tags=["Search"])


@router.get(
    "/{search_term}",
    response_model=ApiResponse[PostPageDTO],
    summary="Search posts by keyword",
)
def search_by_term(
    search_term: str,
    page: int = Query(default=1),
    size: int = Query(default=10),
    use_case: ListPosts = Depends(get_list_posts_use_case),
) -> ApiResponse[PostPageDTO]:
    """Keyword-only shortcut for POST /post/searching."""
    result = use_case.search(search_term, PostFilters(), PostMapper.to_page_request(page, size))
    return ApiResponse[PostPageDTO].ok(PostMapper.to_page_response(result))
