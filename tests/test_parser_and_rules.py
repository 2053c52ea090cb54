import pytest

from order_imports.parser import ImportBlock
from order_imports.parser import locate_import_block
from order_imports.parser import read_lines
from order_imports.rules import Category
from order_imports.rules import CATEGORY_PRIORITY
from order_imports.rules import classify
from order_imports.rules import import_path_key


@pytest.mark.parametrize("line, expected", [
    ('\t"fmt"', Category.STDLIB),
    ('\tstrs "strings"', Category.STDLIB),
    ('\t"platform/db"', Category.PLATFORM),
    ('\t"github.com/x/y"', Category.THIRD_PARTY),
    ('\t"gopkg.in/yaml.v2"', Category.THIRD_PARTY),
    ('\t"golang.org/x/net"', Category.THIRD_PARTY),
    ('\t"pault.ag/go/debian"', Category.THIRD_PARTY),
    ('\t"github.com/platform/tools"', Category.THIRD_PARTY),
    ('\t"platform/z" // "github.com/y"', Category.THIRD_PARTY),
    ("\t// grouped imports", Category.NONE),
    ("   \t ", Category.NONE),
    ("", Category.NONE),
    ("\u00a0", Category.STDLIB),
])
def test_classify(line, expected):
    assert classify(line) is expected


def test_category_priority_orders_groups():
    ordered = sorted(Category, key=CATEGORY_PRIORITY.__getitem__)
    assert ordered == [Category.STDLIB, Category.PLATFORM, Category.THIRD_PARTY, Category.NONE]


def test_import_path_key_strips_alias_and_whitespace():
    assert import_path_key('\tlog "github.com/sirupsen/logrus"') == '"github.com/sirupsen/logrus"'
    assert import_path_key(' "fmt" ') == '"fmt"'
    assert import_path_key("\t// note") == "//note"


def test_locate_import_block():
    lines = ["package main", "", "import (", '\t"fmt"', '\t"os"', ")", "func main() {}"]
    assert locate_import_block(lines) == ImportBlock(3, 5)


def test_locate_import_block_with_comments_on_delimiters():
    lines = ["import ( // deps", '\t"fmt"', ")  // end"]
    assert locate_import_block(lines) == ImportBlock(1, 2)


def test_locate_import_block_uses_first_block():
    lines = ["import (", '\t"fmt"', ")", "import (", '\t"os"', ")"]
    assert locate_import_block(lines) == ImportBlock(1, 2)


def test_locate_import_block_without_close_runs_to_end():
    lines = ["import (", '\t"os"', '\t"fmt"']
    assert locate_import_block(lines) == ImportBlock(1, 3)


def test_locate_import_block_single_import_is_empty():
    lines = ["package main", 'import "fmt"']
    block = locate_import_block(lines)
    assert block == ImportBlock(2, 2)
    assert block.is_empty


def test_locate_import_block_empty_group():
    block = locate_import_block(["import (", ")"])
    assert block.is_empty


def test_read_lines_strips_terminators(tmp_path):
    file = tmp_path / "main.go"
    file.write_text("package main\n\nimport (\n")
    assert read_lines(str(file)) == ["package main", "", "import ("]


def test_read_lines_keeps_carriage_returns(tmp_path):
    file = tmp_path / "main.go"
    file.write_bytes(b'var s = "a\rb"\r\n\r\nimport (\n')
    assert read_lines(str(file)) == ['var s = "a\rb"\r', "\r", "import ("]


def test_locate_import_block_with_crlf_delimiters():
    lines = ["package main\r", "import (\r", '\t"fmt"\r', ")\r"]
    assert locate_import_block(lines) == ImportBlock(2, 3)
