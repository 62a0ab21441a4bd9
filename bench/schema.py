import graphene

DEFAULT_PIC_SIZE = 50

BENCHMARK_QUERY = """
query Example($size: Int) {
  a,
  b,
  x: c
  ...c
  f
  ...on DataType {
    pic(size: $size)
    promise {
      a
    }
  }
  deep {
    a
    b
    c
    deeper {
      a
      b
    }
  }
}
fragment c on DataType {
  d
  e
}
"""


class DeepDataType(graphene.ObjectType):
    a = graphene.String()
    b = graphene.String()
    c = graphene.List(graphene.String)
    deeper = graphene.List(lambda: DataType)

    def resolve_a(self, info):
        return 'Already Been Done'

    def resolve_b(self, info):
        return 'Boring'

    def resolve_c(self, info):
        return ['Contrived', None, 'Confusing']

    def resolve_deeper(self, info):
        return [{}, None, {}]


class DataType(graphene.ObjectType):
    a = graphene.String()
    b = graphene.String()
    c = graphene.String()
    d = graphene.String()
    e = graphene.String()
    f = graphene.String()
    pic = graphene.String(size=graphene.Int())
    deep = graphene.Field(DeepDataType)
    promise = graphene.Field(lambda: DataType)

    def resolve_a(self, info):
        return 'Apple'

    def resolve_b(self, info):
        return 'Banana'

    def resolve_c(self, info):
        return 'Cookie'

    def resolve_d(self, info):
        return 'Donut'

    def resolve_e(self, info):
        return 'Egg'

    def resolve_f(self, info):
        return 'Fish'

    def resolve_pic(self, info, size=None):
        if size is None:
            size = DEFAULT_PIC_SIZE
        return f"Pic of size: {size}"

    def resolve_deep(self, info):
        return {}

    def resolve_promise(self, info):
        return {}


schema = graphene.Schema(query=DataType)
