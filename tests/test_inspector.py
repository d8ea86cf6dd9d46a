from graphql_deprecation_linter import parser
from graphql_deprecation_linter.inspector import collect_deprecation_notices, root_type_names

from .conftest import build_schema_with_root_query


def notices_for(sdl: str, query: str, file_path=None) -> set:
    schema = build_schema_with_root_query(sdl)
    return collect_deprecation_notices(schema, parser.parse_document(query, "test.graphql"), file_path)


def test_deprecated_query():
    sdl = """
    type Query {
      someQuery: String @deprecated(reason: "Use nothing instead")
    }
    """
    assert notices_for(sdl, "query Test { someQuery }") == {'Query "someQuery" is deprecated'}


def test_deprecated_mutation():
    sdl = """
    type Mutation {
      someMutation(input: String!): String! @deprecated(reason: "Use nothing instead")
    }
    """
    assert notices_for(sdl, 'mutation Test { someMutation(input: "hi") }') == {
        'Mutation "someMutation" is deprecated'
    }


def test_deprecated_subscription():
    sdl = """
    type Subscription {
      someSubscription(input: String!): String! @deprecated(reason: "Use nothing instead")
    }
    """
    assert notices_for(sdl, 'subscription Test { someSubscription(input: "hi") }') == {
        'Subscription "someSubscription" is deprecated'
    }


def test_deprecated_field():
    sdl = """
    type SomePayload {
      ok: Boolean
      notOk: String @deprecated(reason: "Use ok instead")
    }
    type Query {
      someQuery: SomePayload
    }
    """
    assert notices_for(sdl, "query Test { someQuery { ok notOk } }") == {
        'Field "SomePayload.notOk" is deprecated'
    }


def test_deprecated_argument():
    sdl = """
    type SomePayload {
      ok: Boolean
    }
    type Query {
      someQuery(arg: String @deprecated(reason: "Stop using it")): SomePayload
    }
    """
    assert notices_for(sdl, 'query Test { someQuery(arg: "hi") { ok } }') == {
        'Argument "arg" from "someQuery" is deprecated'
    }


def test_deprecated_argument_without_reason_uses_default():
    sdl = "type Query { someQuery(arg: String @deprecated): String }"
    assert notices_for(sdl, 'query Test { someQuery(arg: "hi") }') == {
        'Argument "arg" from "someQuery" is deprecated'
    }


def test_unused_deprecated_argument_is_not_reported():
    sdl = "type Query { someQuery(arg: String @deprecated, other: Int): String }"
    assert notices_for(sdl, "query Test { someQuery(other: 1) }") == set()


def test_deprecated_directive_argument_inside_field():
    sdl = """
    directive @cached(ttl: Int @deprecated(reason: "Use maxAge"), maxAge: Int) on FIELD
    type Query { someQuery: String }
    """
    assert notices_for(sdl, "query Test { someQuery @cached(ttl: 5) }") == {
        'Argument "ttl" from "someQuery" is deprecated'
    }


def test_deprecated_directive_argument_on_operation():
    sdl = """
    directive @trace(level: Int @deprecated(reason: "Always on")) on QUERY
    type Query { someQuery: String }
    """
    assert notices_for(sdl, "query Test @trace(level: 1) { someQuery }") == {
        'Argument "level" from "@trace" is deprecated'
    }


def test_nested_fields_through_fragments_and_aliases():
    sdl = """
    type Inner { old: String @deprecated(reason: "gone") new: String }
    type Outer { inner: Inner }
    type Query { outer: Outer }
    """
    query = """
    query Test { outer { ...OuterFields } }
    fragment OuterFields on Outer { renamed: inner { ... on Inner { old new } } }
    """
    assert notices_for(sdl, query) == {'Field "Inner.old" is deprecated'}


def test_custom_root_type_names():
    sdl = """
    schema { query: RootQuery }
    type RootQuery { legacy: String @deprecated(reason: "gone") }
    """
    schema = parser.build_schema_from_sdl(sdl)
    assert root_type_names(schema) == {"RootQuery"}
    notices = collect_deprecation_notices(schema, parser.parse_document("{ legacy }", "test.graphql"))
    assert notices == {'RootQuery "legacy" is deprecated'}


def test_file_path_suffix():
    sdl = "type Query { someQuery: String @deprecated(reason: \"x\") }"
    assert notices_for(sdl, "{ someQuery }", "ops/a.graphql") == {
        'Query "someQuery" is deprecated in ops/a.graphql'
    }


def test_unknown_fields_are_ignored():
    sdl = "type Query { someQuery: String @deprecated(reason: \"x\") }"
    assert notices_for(sdl, "{ nope(arg: 1) { deeper } }") == set()


def test_repeated_usage_collapses():
    sdl = "type Query { someQuery: String @deprecated(reason: \"x\") }"
    assert notices_for(sdl, "{ a: someQuery b: someQuery } query Other { someQuery }") == {
        'Query "someQuery" is deprecated'
    }
