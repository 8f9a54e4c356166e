"""End-to-end tests converting realistic HTML tables to tbl."""

import pytest
from utils import content_section, format_lines

from html2tbl import TableOptions, convert_tables, parse_table


@pytest.mark.integration
class TestTableConversion:
    """Full conversions of page-like tables."""

    def test_header_colspan_and_body_rowspan(self):
        html = """
        <table class="wikitable">
        <tr><th>Type</th><th colspan="2">Size</th></tr>
        <tr><td rowspan="2"><code>int</code></td><td>16</td><td>bits</td></tr>
        <tr><td>32</td><td>bits</td></tr>
        </table>
        """

        block = parse_table(html)

        expected = "\n".join(
            [
                ".TS",
                "allbox tab(|);",
                "c cx s ",
                "l lx l ",
                "^ lx l ",
                ".",
                "T{",
                "Type",
                "T}|T{",
                "Size",
                "T}",
                "T{",
                "int",
                "T}|T{",
                "16",
                "T}|T{",
                "bits",
                "T}",
                "\\^|T{",
                "32",
                "T}|T{",
                "bits",
                "T}",
                ".TE",
                ".sp",
                ".sp",
                "",
            ]
        )
        assert block == expected

    def test_sectioned_table(self):
        html = """
        <table>
            <caption>Quarterly Sales Data</caption>
            <thead>
                <tr><th>Product</th><th>Q1</th><th>Q2</th><th>Total</th></tr>
            </thead>
            <tbody>
                <tr><td>Widget A</td><td>100</td><td>150</td><td>250</td></tr>
                <tr><td>Widget B</td><td>75</td><td>125</td><td>200</td></tr>
            </tbody>
            <tfoot>
                <tr><td><strong>Total</strong></td><td>175</td><td>275</td><td><strong>450</strong></td></tr>
            </tfoot>
        </table>
        """

        block = parse_table(html)

        assert format_lines(block) == ["c c c cx ", "l l l lx ", "l l l lx ", "l l l lx "]
        rows = content_section(block).split("T}\n")[:-1]
        assert len(rows) == 4
        assert rows[3] == "T{\nTotal\nT}|T{\n175\nT}|T{\n275\nT}|T{\n450\n"

    def test_page_with_tables(self):
        page = (
            "<h3>Return value</h3><p>See below.</p>"
            "<table><tr><th>value</th><th>meaning</th></tr>"
            "<tr><td>0</td><td>.success</td></tr></table>"
            "<h3>Example</h3>"
            "<table><tr><td><pre>int main()\n{\n}</pre></td></tr></table>"
        )

        converted = convert_tables(page, TableOptions(column_separator="#"))

        assert converted.startswith("<h3>Return value</h3><p>See below.</p>.TS\nallbox tab(#);\nc cx \nl lx \n.\n")
        assert "T{\n0\nT}#T{\n\\&.success\nT}\n" in converted
        assert "<h3>Example</h3>.TS\n" in converted
        assert "T{\nint main()\n.br\n{\n.br\n}\nT}\n" in converted
        assert "<table" not in converted
