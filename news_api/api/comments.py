from fastapi import APIRouter, Response

from news_api.services import articles as svc

router = APIRouter(prefix="/comments", tags=["comments"])


@router.delete("/{comment_id}", status_code=204, response_class=Response, summary="Delete a comment")
async def api_delete_comment(comment_id: str) -> Response:
    await svc.delete_comment(comment_id)
    return Response(status_code=204)
