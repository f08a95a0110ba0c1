from fastapi import APIRouter, Depends, Query

from roomfinder_marketing.entrypoints.http.dependencies import (
    get_current_owner_id,
    get_list_posts_use_case,
    get_marketing_info_use_case,
    get_post_by_id_use_case,
    get_promotional_post_by_id_use_case,
)
from roomfinder_marketing.entrypoints.http.dtos.posts import (
    PRICE_PATTERN,
    MarketingInfoDTO,
    PostFilterQueryDTO,
    PostPageDTO,
    PostResponseDTO,
    SearchPostRequestDTO,
)
from roomfinder_marketing.entrypoints.http.envelope import ApiResponse
from roomfinder_marketing.entrypoints.http.mappers.post_mapper import PostMapper
from roomfinder_marketing.use_cases.get_marketing_info import GetMarketingInfo
from roomfinder_marketing.use_cases.get_post_by_id import GetPostById, GetPostByIdRequest
from roomfinder_marketing.use_cases.get_promotional_post_by_id import GetPromotionalPostById
from roomfinder_marketing.use_cases.list_posts import ListPosts

router = APIRouter(prefix="/post", tags=["Posts"])

PAGE_DESCRIPTION = "1-based page number; values below 1 are treated as 1"
SIZE_DESCRIPTION = "Page size; values below 1 become 1, large values are capped"

PostPageEnvelope = ApiResponse[PostPageDTO]


def post_filter_query(
    district: int | None = Query(default=None, description="District code; 0 means any"),
    type_code: int | None = Query(default=None, alias="type", description="Type code; 0 means any"),
    price_min: str | None = Query(default=None, alias="priceMin", pattern=PRICE_PATTERN),
    price_max: str | None = Query(default=None, alias="priceMax", pattern=PRICE_PATTERN),
) -> PostFilterQueryDTO:
    return PostFilterQueryDTO(
        district=district,
        type=type_code,
        price_min=price_min,
        price_max=price_max,
    )


@router.get("/all", response_model=PostPageEnvelope, summary="List all posts")
def list_posts(
    page: int = Query(default=1, description=PAGE_DESCRIPTION),
    size: int = Query(default=10, description=SIZE_DESCRIPTION),
    use_case: ListPosts = Depends(get_list_posts_use_case),
) -> PostPageEnvelope:
    """Newest first; equal timestamps ordered by id."""
    result = use_case.list_all(PostMapper.to_page_request(page, size))
    return PostPageEnvelope.ok(PostMapper.to_page_response(result))


@router.get(
    "/list-post-featured",
    response_model=PostPageEnvelope,
    summary="List posts inside their featured window",
)
def list_featured_posts(
    page: int = Query(default=1, description=PAGE_DESCRIPTION),
    size: int = Query(default=10, description=SIZE_DESCRIPTION),
    use_case: ListPosts = Depends(get_list_posts_use_case),
) -> PostPageEnvelope:
    result = use_case.list_featured(PostMapper.to_page_request(page, size))
    return PostPageEnvelope.ok(PostMapper.to_page_response(result))


@router.get(
    "/list-post-promotional",
    response_model=PostPageEnvelope,
    summary="List posts inside their promotional window",
)
def list_promotional_posts(
    page: int = Query(default=1, description=PAGE_DESCRIPTION),
    size: int = Query(default=10, description=SIZE_DESCRIPTION),
    use_case: ListPosts = Depends(get_list_posts_use_case),
) -> PostPageEnvelope:
    result = use_case.list_promotional(PostMapper.to_page_request(page, size))
    return PostPageEnvelope.ok(PostMapper.to_page_response(result))


@router.get(
    "/post-filter",
    response_model=PostPageEnvelope,
    summary="Filter posts",
    description="""
    Combine district, type and price range filters.

    ## Filters
    - All filters use AND semantics
    - district/type: 0 or omitted means no restriction
    - priceMin/priceMax: inclusive; priceMin must not exceed priceMax
    """,
)
def filter_posts(
    criteria: PostFilterQueryDTO = Depends(post_filter_query),
    page: int = Query(default=1, description=PAGE_DESCRIPTION),
    size: int = Query(default=10, description=SIZE_DESCRIPTION),
    use_case: ListPosts = Depends(get_list_posts_use_case),
) -> PostPageEnvelope:
    result = use_case.filter(
        PostMapper.to_domain_filters(criteria), PostMapper.to_page_request(page, size)
    )
    return PostPageEnvelope.ok(PostMapper.to_page_response(result))


@router.post(
    "/searching",
    response_model=PostPageEnvelope,
    summary="Search posts by keyword and filters",
)
def search_posts(
    payload: SearchPostRequestDTO,
    page: int = Query(default=1, description=PAGE_DESCRIPTION),
    size: int = Query(default=10, description=SIZE_DESCRIPTION),
    use_case: ListPosts = Depends(get_list_posts_use_case),
) -> PostPageEnvelope:
    result = use_case.search(
        payload.keyword,
        PostMapper.to_domain_filters(payload),
        PostMapper.to_page_request(page, size),
    )
    return PostPageEnvelope.ok(PostMapper.to_page_response(result))


@router.get(
    "/byUser",
    response_model=PostPageEnvelope,
    summary="List the caller's posts with a given status",
)
def list_user_posts(
    status: str | None = Query(default=None, description="Post status, e.g. active"),
    page: int = Query(default=1, description=PAGE_DESCRIPTION),
    size: int = Query(default=5, description=SIZE_DESCRIPTION),
    owner_id: str = Depends(get_current_owner_id),
    use_case: ListPosts = Depends(get_list_posts_use_case),
) -> PostPageEnvelope:
    result = use_case.list_by_user(owner_id, status, PostMapper.to_page_request(page, size))
    return PostPageEnvelope.ok(PostMapper.to_page_response(result))


@router.get("/district", response_model=PostPageEnvelope, summary="List posts by district")
def list_posts_by_district(
    district: int = Query(description="District code; 0 means any"),
    page: int = Query(default=1, description=PAGE_DESCRIPTION),
    size: int = Query(default=5, description=SIZE_DESCRIPTION),
    use_case: ListPosts = Depends(get_list_posts_use_case),
) -> PostPageEnvelope:
    result = use_case.list_by_district(district, PostMapper.to_page_request(page, size))
    return PostPageEnvelope.ok(PostMapper.to_page_response(result))


@router.get("/fil-type", response_model=PostPageEnvelope, summary="List posts by type")
def list_posts_by_type(
    type_code: int = Query(alias="type", description="Type code; 0 means any"),
    page: int = Query(default=1, description=PAGE_DESCRIPTION),
    size: int = Query(default=5, description=SIZE_DESCRIPTION),
    use_case: ListPosts = Depends(get_list_posts_use_case),
) -> PostPageEnvelope:
    result = use_case.list_by_type(type_code, PostMapper.to_page_request(page, size))
    return PostPageEnvelope.ok(PostMapper.to_page_response(result))


@router.get(
    "/post-by-id/{post_id}",
    response_model=ApiResponse[PostResponseDTO],
    summary="Get post by ID",
)
def get_post(
    post_id: str,
    use_case: GetPostById = Depends(get_post_by_id_use_case),
) -> ApiResponse[PostResponseDTO]:
    post = use_case.execute(GetPostByIdRequest(post_id=post_id))
    return ApiResponse[PostResponseDTO].ok(PostMapper.to_post_response(post))


@router.get(
    "/post-promotional-by-id/{post_id}",
    response_model=ApiResponse[PostResponseDTO],
    summary="Get a post by ID while its promotional window is open",
)
def get_promotional_post(
    post_id: str,
    use_case: GetPromotionalPostById = Depends(get_promotional_post_by_id_use_case),
) -> ApiResponse[PostResponseDTO]:
    post = use_case.execute(GetPostByIdRequest(post_id=post_id))
    return ApiResponse[PostResponseDTO].ok(PostMapper.to_post_response(post))


@router.get(
    "/info-marketing",
    response_model=ApiResponse[MarketingInfoDTO],
    summary="Post counts for the marketing dashboard",
)
def get_marketing_info(
    use_case: GetMarketingInfo = Depends(get_marketing_info_use_case),
) -> ApiResponse[MarketingInfoDTO]:
    return ApiResponse[MarketingInfoDTO].ok(
        PostMapper.to_marketing_info_response(use_case.execute())
    )
