import unittest

import shape_schema as ss
from shape_schema import validator
from shape_schema.validator import SchemaError
from tests._util import Even


class ValidatorTests(unittest.TestCase):
    def setUp(self):
        # Config-like schema used by several tests
        self.schema = ss.map_(
            {
                "name": ss.string(min=1),
                "count": ss.number(int=True, ge=1, le=3),
                "tags": ss.list_(ss.string()).default([]),
                "mode": ss.union(ss.literal("fast"), ss.literal("slow")),
            },
            foreign_keys="strict",
        )

    def test_valid_document(self):
        doc = {"name": "foo", "count": 2, "mode": "fast"}
        self.assertEqual(
            validator.evaluate(self.schema, doc),
            ss.Ok({"name": "foo", "count": 2, "tags": [], "mode": "fast"}),
        )

    def test_all_issues_in_one_pass(self):
        doc = {"name": "", "count": 7.5, "tags": ["a", 1], "mode": "fast"}
        res = validator.evaluate(self.schema, doc)
        self.assertEqual(
            [(i.kind, i.path) for i in res.error.issues],
            [
                ("too_small", ["name"]),
                ("too_big", ["count"]),
                ("invalid_type", ["count"]),
                ("invalid_type", ["tags", 1]),
            ],
        )

    def test_evaluate_or_raise_returns_value(self):
        self.assertEqual(validator.evaluate_or_raise(ss.string(), "x"), "x")

    def test_evaluate_or_raise_message(self):
        schema = ss.tuple_([ss.string(), ss.number()])
        with self.assertRaises(SchemaError) as ctx:
            validator.evaluate_or_raise(schema, (1, "a"))
        self.assertEqual(
            str(ctx.exception),
            "Expected string, got number (in path [0])\nExpected number, got string (in path [1])",
        )
        self.assertEqual(len(ctx.exception.issues), 2)

    def test_is_valid(self):
        self.assertTrue(validator.is_valid(Even(), 4))
        self.assertFalse(validator.is_valid(Even(), 5))

    def test_non_schema_rejected(self):
        with self.assertRaises(TypeError):
            validator.evaluate({"type": "string"}, "x")

    def test_evaluation_is_idempotent(self):
        doc = {"name": 3, "count": "x", "tags": {"k": 1}, "mode": "medium", "extra": 1}
        first = validator.evaluate(self.schema, doc)
        for _ in range(3):
            self.assertEqual(validator.evaluate(self.schema, doc), first)
        self.assertEqual(doc, {"name": 3, "count": "x", "tags": {"k": 1}, "mode": "medium", "extra": 1})

    def test_shared_subschema(self):
        port = ss.number(int=True, gt=0)
        a = ss.list_(port)
        b = ss.map_({"p": port})
        self.assertTrue(validator.is_valid(a, [1, 2]))
        self.assertFalse(validator.is_valid(b, {"p": 0}))
        self.assertIsNone(port.lt)

    def test_logs_failures_at_debug(self):
        with self.assertLogs("shape_schema.validator", level="DEBUG") as logs:
            validator.evaluate(ss.never(), 1)
        self.assertIn("1 issue(s)", logs.output[0])


class SetTests(unittest.TestCase):
    def test_set_returns_new_schema(self):
        base = ss.string()
        bounded = base.set(max=4)
        self.assertIsNone(base.max)
        self.assertEqual(str(validator.evaluate(bounded, "12345").error),
                         "String must contain at most 4 character(s) (in path [])")

    def test_set_rejects_unknown_option(self):
        with self.assertRaises(TypeError):
            ss.number().set(maximum=3)

    def test_set_revalidates(self):
        with self.assertRaises(ValueError):
            ss.map_({}).set(foreign_keys="nope")

    def test_schemas_hash_by_identity(self):
        keyed = ss.map_({"a": ss.number()})
        listed = ss.list_(ss.any_(), keys=[("a", ss.number())])
        self.assertEqual(len({keyed, listed, ss.map_({})}), 3)
        self.assertIn(keyed, {keyed: "cached"})
        self.assertNotEqual(ss.number(), ss.number())
