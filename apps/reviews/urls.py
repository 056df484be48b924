"""URL routing for the reviews domain."""

from django.urls import path  # type: ignore

from .views import ReviewViewSet

app_name = 'reviews'

review_list = ReviewViewSet.as_view({'get': 'list'})
review_author = ReviewViewSet.as_view({'get': 'author'})
place_reviews = ReviewViewSet.as_view({'get': 'list_for_place', 'post': 'create'})
place_review_detail = ReviewViewSet.as_view({'get': 'retrieve_for_place'})
user_reviews = ReviewViewSet.as_view({'get': 'list_for_user'})
user_review_detail = ReviewViewSet.as_view(
    {'get': 'retrieve_for_user', 'put': 'update', 'patch': 'update', 'delete': 'destroy'}
)

urlpatterns = [
    path('reviews/', review_list, name='review-list'),
    path('reviews/<int:pk>/user/', review_author, name='review-author'),
    path('places/<int:place_id>/reviews/', place_reviews, name='place-reviews'),
    path('places/<int:place_id>/reviews/<int:pk>/', place_review_detail, name='place-review-detail'),
    path('users/<int:user_id>/reviews/', user_reviews, name='user-reviews'),
    path('users/<int:user_id>/reviews/<int:pk>/', user_review_detail, name='user-review-detail'),
]
