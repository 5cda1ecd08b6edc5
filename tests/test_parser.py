"""Tests for the recursive descent parser (happy paths)."""

from treetext import Parser, TreeNode, parse


def _values(node: TreeNode) -> list[str]:
    return [child.value for child in node.children]


class TestParseSimple:
    def test_single_node(self) -> None:
        result = parse("(A)")
        assert result.value == "A"
        assert result.children == []

    def test_children(self) -> None:
        result = parse("(A B C D)")
        assert result.value == "A"
        assert _values(result) == ["B", "C", "D"]
        assert all(child.is_leaf for child in result.children)

    def test_nested(self) -> None:
        result = parse("(A (B C) D)")
        assert result.value == "A"
        assert _values(result) == ["B", "D"]
        subtree = result.children[0]
        assert _values(subtree) == ["C"]
        assert subtree.children[0].is_leaf
        assert result.children[1].is_leaf

    def test_surrounding_whitespace(self) -> None:
        result = parse("  \n(A\tB\n C)  \t")
        assert result.value == "A"
        assert _values(result) == ["B", "C"]

    def test_subtree_as_first_child(self) -> None:
        result = parse("(A (B) C)")
        assert _values(result) == ["B", "C"]
        assert result.children[0].is_leaf

    def test_trailing_tokens_ignored(self) -> None:
        result = parse("(A B) (C D)")
        assert result.value == "A"
        assert _values(result) == ["B"]


class TestParseComplex:
    def test_leaves_only(self) -> None:
        result = parse("(ROOT A B C D E)")
        assert result.value == "ROOT"
        assert len(result.children) == 5
        assert all(child.is_leaf for child in result.children)

    def test_deep_chain(self) -> None:
        current = parse("(A (B (C (D (E F)))))")
        for value in ["A", "B", "C", "D", "E"]:
            assert current.value == value
            assert len(current.children) == 1
            current = current.children[0]
        assert current.value == "F"
        assert current.is_leaf

    def test_unbalanced_shape(self) -> None:
        result = parse("(A (B C D) E (F (G H I J) K) L)")
        assert _values(result) == ["B", "E", "F", "L"]
        assert _values(result.children[0]) == ["C", "D"]
        assert result.children[1].is_leaf
        f = result.children[2]
        assert _values(f) == ["G", "K"]
        assert _values(f.children[0]) == ["H", "I", "J"]

    def test_org_chart(self) -> None:
        result = parse("(CEO (CTO (DevTeam Engineer1 Engineer2) (QATeam Tester1)) (CFO (Accounting Finance)))")
        assert result.value == "CEO"
        assert _values(result) == ["CTO", "CFO"]
        assert _values(result.children[0]) == ["DevTeam", "QATeam"]

    def test_expression(self) -> None:
        result = parse("(+ (* 2 3) (/ 8 4))")
        assert result.value == "+"
        assert _values(result) == ["*", "/"]
        assert _values(result.children[1]) == ["8", "4"]


class TestParseStress:
    def test_depth_ten(self) -> None:
        source = "(A" + "".join(f" (B{i}" for i in range(10)) + "".join(f" C{i})" for i in range(10)) + ")"
        result = parse(source)
        assert result.value == "A"
        node = result
        for i in range(10):
            node = node.children[0]
            assert node.value == f"B{i}"
        assert result.node_count() == 21

    def test_fifty_siblings(self) -> None:
        children = " ".join(f"CHILD{i}" for i in range(50))
        result = parse(f"(ROOT {children})")
        assert result.value == "ROOT"
        assert _values(result) == [f"CHILD{i}" for i in range(50)]

    def test_moderately_deep_nesting_is_not_truncated(self) -> None:
        depth = 200
        source = "".join(f"(N{i} " for i in range(depth)) + ")" * depth
        result = parse(source)
        assert result.node_count() == depth
        assert [n.value for n in result.walk()][-1] == f"N{depth - 1}"


class TestParserInstance:
    def test_parse_matches_function(self) -> None:
        source = "(A (B C) D)"
        assert Parser(source).parse() == parse(source)

    def test_without_wrapper_check_accepts_trailing_text(self) -> None:
        result = Parser("(A B) C", require_wrapper=False).parse()
        assert result.value == "A"
        assert _values(result) == ["B"]
