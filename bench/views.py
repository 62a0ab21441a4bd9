from graphene_django.views import GraphQLView


class BenchGraphQLView(GraphQLView):
    """GraphQL endpoint that opens GraphiQL for any bare GET.

    graphene-django only renders GraphiQL when the client prefers
    ``text/html``; a GET without a ``query`` parameter gets the explorer here
    as well, unless ``raw`` is passed.
    """

    @classmethod
    def can_display_graphiql(cls, request, data):
        if request.method.lower() == 'get' and 'raw' not in request.GET and not request.GET.get('query'):
            return True
        return super().can_display_graphiql(request, data)
