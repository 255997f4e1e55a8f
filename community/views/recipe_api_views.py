from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from community.models import RecipePost
from community.permissions import IsOwnerOrReadOnly
from community.repos.post_repo import PostRepo
from community.serializers import CommentSerializer, RecipeSerializer
from community.services import CommentService, RecipePostService
from community.views.view_utils import get_or_not_found

recipe_service = RecipePostService()
comment_service = CommentService()


def _recipe(recipe_id):
    return get_or_not_found(RecipePost, "Recipe not found", id=recipe_id)


class RecipeListApi(generics.ListCreateAPIView):
    """List recipes newest first and allow authenticated creation."""
    serializer_class = RecipeSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get_queryset(self):
        """
        Optionally restricts the returned recipes by filtering
        against a `category`, `search` or `userId` query parameter in the URL.
        """
        params = self.request.query_params
        author_id = params.get("userId")
        queryset = PostRepo().list_for_feed(
            category=params.get("category"),
            search=params.get("search"),
            author_id=int(author_id) if author_id and author_id.isdigit() else None,
        )
        return queryset.prefetch_related("likes", "comments__user")

    def perform_create(self, serializer):
        """Assign current user as author on create."""
        serializer.save(author=self.request.user)


class RecipeDetailApi(generics.RetrieveUpdateDestroyAPIView):
    """Retrieve, update, or delete a recipe, respecting ownership permissions."""
    queryset = RecipePost.objects.select_related("author").prefetch_related("likes", "comments__user")
    serializer_class = RecipeSerializer
    permission_classes = [IsOwnerOrReadOnly]
    lookup_url_kwarg = "recipe_id"

    def destroy(self, request, *args, **kwargs):
        recipe_service.delete(self.get_object(), request.user)
        return Response({"message": "Recipe deleted successfully"}, status=status.HTTP_200_OK)


@api_view(["POST", "DELETE"])
@permission_classes([IsAuthenticated])
def recipe_like(request, recipe_id):
    """Like (POST) or unlike (DELETE) a recipe; returns the new like count."""
    recipe = _recipe(recipe_id)
    if request.method == "POST":
        count = recipe_service.like(request.user, recipe)
    else:
        count = recipe_service.unlike(request.user, recipe)
    return Response({"likesCount": count})


@api_view(["GET", "POST"])
@permission_classes([permissions.IsAuthenticatedOrReadOnly])
def recipe_comments(request, recipe_id):
    recipe = _recipe(recipe_id)
    if request.method == "GET":
        comments = recipe.comments.select_related("user")
        return Response(CommentSerializer(comments, many=True).data)

    serializer = CommentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    comment_service.create_comment(recipe, request.user, serializer)
    return Response(CommentSerializer(recipe.comments.select_related("user"), many=True).data, status=status.HTTP_201_CREATED)


@api_view(["DELETE"])
@permission_classes([IsAuthenticated])
def recipe_comment_detail(request, recipe_id, comment_id):
    recipe = _recipe(recipe_id)
    comment = comment_service.fetch(recipe, comment_id)
    comment_service.delete_comment(comment, request.user)
    return Response({"message": "Comment deleted successfully", "commentsCount": recipe.comments.count()})
