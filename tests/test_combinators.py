import unittest

import shape_schema as ss
from tests._util import CountingSchema, issues


class UnionTests(unittest.TestCase):
    def test_first_success_wins_and_stops(self):
        first = CountingSchema(ss.string())
        second = CountingSchema(ss.number().transform(lambda n: n * 2))
        third = CountingSchema(ss.any_())
        res = ss.evaluate(ss.union(first, second, third), 21)
        self.assertEqual(res, ss.Ok(42))
        self.assertEqual((first.calls, second.calls, third.calls), (1, 1, 0))

    def test_failure_is_single_issue_with_every_alternative_error(self):
        res = ss.evaluate(ss.union(ss.string(), ss.number(gt=0)), -1)
        (issue,) = issues(res)
        self.assertEqual((issue.kind, issue.path, issue.message), ("invalid_union", [], "Invalid input"))
        union_errors = issue.data["union_errors"]
        self.assertEqual([e.issues[0].kind for e in union_errors], ["invalid_type", "too_small"])

    def test_failure_path_inside_composite(self):
        schema = ss.list_(ss.union(ss.literal("a"), ss.literal("b")))
        res = ss.evaluate(schema, ["a", "c"])
        self.assertEqual([(i.kind, i.path) for i in issues(res)], [("invalid_union", [1])])
        inner = issues(res)[0].data["union_errors"][0].issues[0]
        self.assertEqual(inner.path, [1])

    def test_needs_two_alternatives(self):
        with self.assertRaises(ValueError):
            ss.union(ss.string())


class TransformTests(unittest.TestCase):
    def test_applied_on_success(self):
        self.assertEqual(ss.evaluate(ss.transform(ss.string(), str.upper), "abc"), ss.Ok("ABC"))

    def test_not_applied_on_failure(self):
        calls = []
        res = ss.evaluate(ss.string().transform(calls.append), 1)
        self.assertEqual(str(res.error), "Expected string, got number (in path [])")
        self.assertEqual(calls, [])

    def test_exceptions_from_fn_propagate(self):
        schema = ss.number().transform(lambda n: 1 / n)
        with self.assertRaises(ZeroDivisionError):
            ss.evaluate(schema, 0)

    def test_fn_must_be_callable(self):
        with self.assertRaises(TypeError):
            ss.transform(ss.string(), "upper")


class DefaultTests(unittest.TestCase):
    def test_none_short_circuits_without_child(self):
        child = CountingSchema(ss.never())
        self.assertEqual(ss.evaluate(ss.default(child, 5), None), ss.Ok(5))
        self.assertEqual(child.calls, 0)

    def test_other_values_delegate(self):
        schema = ss.number().default(0)
        self.assertEqual(ss.evaluate(schema, 3), ss.Ok(3))
        self.assertEqual(str(ss.evaluate(schema, "3").error), "Expected number, got string (in path [])")

    def test_default_fills_absent_map_keys(self):
        schema = ss.map_({"port": ss.number().default(80), "host": ss.string()})
        self.assertEqual(ss.evaluate(schema, {"host": "h"}), ss.Ok({"port": 80, "host": "h"}))
