from postman_openapi.parser.markdown import parse_md_table, split_description

TABLE = (
    "| object | name | description | required | type | example |\n"
    "|--------|------|-------------|----------|------|---------|\n"
    "| query | page | Page number | false | integer | 1 |"
)


class TestSplitDescription:
    def test_no_table(self):
        text, table = split_description("Just words.\nMore words.")
        assert text == "Just words.\nMore words."
        assert table == ""

    def test_table_in_the_middle(self):
        text, table = split_description(f"Intro.\n\n## Parameters\n\n{TABLE}\n\nOutro.")
        assert text == "Intro.\n\nOutro."
        assert table == TABLE

    def test_table_at_start(self):
        text, table = split_description(f"{TABLE}\nAfter.")
        assert text == "After."
        assert table == TABLE

    def test_table_at_end(self):
        text, table = split_description(f"Before.\n{TABLE}")
        assert text == "Before."
        assert table == TABLE

    def test_bare_dash_alignment_row_stays_in_table(self):
        text, table = split_description("| name |\n-----\n| id |\nDone.")
        assert table == "| name |\n-----\n| id |"
        assert text == "Done."

    def test_multiple_tables(self):
        second = "| object | name |\n|---|---|\n| header | X-Id |"
        text, table = split_description(f"One.\n{TABLE}\nTwo.\n{second}\nThree.")
        assert text == "One.\nTwo.\nThree."
        assert table == f"{TABLE}\n\n{second}"


class TestParseMdTable:
    def test_rows_keyed_by_index(self):
        rows = parse_md_table(TABLE)
        assert rows == {
            0: {
                "object": "query",
                "name": "page",
                "description": "Page number",
                "required": "false",
                "type": "integer",
                "example": "1",
            }
        }

    def test_header_names_are_lowercased(self):
        rows = parse_md_table("| Object | Name |\n|---|---|\n| path | id |")
        assert rows == {0: {"object": "path", "name": "id"}}

    def test_short_rows(self):
        rows = parse_md_table("| object | name | type |\n|---|---|---|\n| query | q |")
        assert rows == {0: {"object": "query", "name": "q"}}

    def test_second_table_has_its_own_header(self):
        rows = parse_md_table("| name |\n|---|\n| a |\n\n| object | name |\n|---|---|\n| header | b |")
        assert rows == {0: {"name": "a"}, 1: {"object": "header", "name": "b"}}

    def test_header_only(self):
        assert parse_md_table("| object | name |\n|---|---|") == {}

    def test_empty(self):
        assert parse_md_table("") == {}
