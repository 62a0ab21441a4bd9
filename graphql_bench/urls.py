"""
URL configuration for graphql_bench project.

``graphql`` serves the hello-world schema that load tests target;
``graphql/data`` serves the deeper benchmark schema.
"""
from django.conf import settings
from django.urls import path
from django.views.decorators.csrf import csrf_exempt

from bench.api import BenchmarkListView
from bench.schema import schema as data_schema
from bench.views import BenchGraphQLView
from graphql_bench.schema import schema

urlpatterns = [
    path('graphql', csrf_exempt(BenchGraphQLView.as_view(schema=schema, graphiql=settings.GRAPHIQL_ENABLED))),
    path('graphql/data', csrf_exempt(BenchGraphQLView.as_view(schema=data_schema, graphiql=settings.GRAPHIQL_ENABLED))),
    path('api/benchmarks/', BenchmarkListView.as_view()),
]
