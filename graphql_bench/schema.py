import graphene


class Query(graphene.ObjectType):
    hello = graphene.String(description="Always resolves to 'world'.")

    class Meta:
        name = 'RootQueryType'

    def resolve_hello(self, info):
        return 'world'


schema = graphene.Schema(query=Query)
