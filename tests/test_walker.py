import logging

from postman_openapi.config import ConvertOptions
from postman_openapi.generator.fragment import Collision, Fragment
from postman_openapi.generator.objects import Operation, SecurityScheme
from postman_openapi.generator.walker import walk
from postman_openapi.parser.base import ItemGroup, UnknownNode


def _group(name: str | None, *children) -> ItemGroup:
    return ItemGroup.model_validate({"name": name, "item": list(children)})


def _request(name: str, url: str, method: str = "GET", **request) -> dict:
    return {"name": name, "request": {"method": method, "url": url, **request}}


class TestWalkTags:
    def test_two_levels_of_folders(self):
        tree = _group(None, {"name": "A", "item": [{"name": "B", "item": [_request("Leaf", "/leaf")]}]})
        fragment = walk(tree)
        assert fragment.paths["/leaf"]["get"].tags == ["A > B"]

    def test_no_folder_gives_default_tag(self):
        fragment = walk(_group(None, _request("Leaf", "/leaf")))
        assert fragment.paths["/leaf"]["get"].tags == ["default"]

    def test_unnamed_folder_adds_no_tag(self):
        tree = _group(None, {"name": "A", "item": [{"name": "", "item": [_request("Leaf", "/leaf")]}]})
        assert walk(tree).paths["/leaf"]["get"].tags == ["A"]


class TestWalkMerge:
    def test_last_sibling_wins_on_same_path_and_method(self):
        tree = _group(None, _request("First", "/things"), _request("Second", "/things"))
        fragment = walk(tree)
        assert fragment.paths["/things"]["get"].summary == "Second"

    def test_depth_first_order_decides_winner(self):
        tree = _group(
            None,
            {"name": "Folder", "item": [_request("Nested", "/things")]},
            _request("After", "/things"),
        )
        assert walk(tree).paths["/things"]["get"].summary == "After"

    def test_methods_on_same_path_are_combined(self):
        tree = _group(
            None,
            {"name": "Read", "item": [_request("List", "/things")]},
            {"name": "Write", "item": [_request("Create", "/things", method="POST")]},
        )
        path_item = walk(tree).paths["/things"]
        assert list(path_item) == ["get", "post"]
        assert path_item["get"].tags == ["Read"]
        assert path_item["post"].tags == ["Write"]

    def test_collisions_are_recorded(self):
        tree = _group(None, _request("First", "/things"), _request("Second", "/things"))
        assert walk(tree).collisions == [Collision(kind="operation", key="/things", method="get")]

    def test_schemes_shared_across_branches(self):
        tree = _group(
            None,
            {"name": "A", "item": [_request("One", "/one", auth={"type": "bearer"})]},
            {"name": "B", "item": [_request("Two", "/two", auth={"type": "bearer"}),
                                   _request("Three", "/three", auth={"type": "basic"})]},
        )
        fragment = walk(tree)
        assert list(fragment.security_schemes) == ["bearerAuth", "basicAuth"]
        assert fragment.collisions == []

    def test_malformed_nodes_contribute_nothing(self):
        tree = _group(None, {"name": "Broken"}, 42, _request("Ok", "/ok"))
        assert list(walk(tree).paths) == ["/ok"]

    def test_unknown_node_alone(self):
        assert walk(UnknownNode(raw=1)) == Fragment()

    def test_folder_auth_is_not_inherited(self):
        tree = _group(None, {"name": "A", "auth": {"type": "bearer"}, "item": [_request("Leaf", "/leaf")]})
        fragment = walk(tree)
        assert fragment.security_schemes == {}
        assert fragment.paths["/leaf"]["get"].security is None


class TestStrictMode:
    def test_strict_logs_collisions_as_warnings(self, caplog):
        tree = _group(None, _request("First", "/things"), _request("Second", "/things"))
        with caplog.at_level(logging.WARNING):
            fragment = walk(tree, ConvertOptions(strict=True))
        assert "GET /things defined more than once" in caplog.text
        assert fragment.paths["/things"]["get"].summary == "Second"

    def test_default_mode_keeps_quiet(self, caplog):
        tree = _group(None, _request("First", "/things"), _request("Second", "/things"))
        with caplog.at_level(logging.WARNING):
            walk(tree)
        assert caplog.text == ""


class TestFragmentMerge:
    def test_differing_scheme_redefinition_is_a_collision(self):
        first = Fragment(security_schemes={"apikeyAuth": SecurityScheme(type="apiKey", name="a", location="header")})
        second = Fragment(security_schemes={"apikeyAuth": SecurityScheme(type="apiKey", name="b", location="header")})
        found = first.merge(second)
        assert found == [Collision(kind="security_scheme", key="apikeyAuth")]
        assert first.security_schemes["apikeyAuth"].name == "b"

    def test_method_level_merge(self):
        target = Fragment(paths={"/x": {"get": Operation(tags=["a"]), "put": Operation(tags=["a"])}})
        target.merge(Fragment(paths={"/x": {"get": Operation(tags=["b"])}}))
        assert target.paths["/x"]["get"].tags == ["b"]
        assert target.paths["/x"]["put"].tags == ["a"]
