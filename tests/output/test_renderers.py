"""Tests for operation-specific Rich renderers."""

from usecasectl.output.console import create_console, get_output, style_for_goal_level
from usecasectl.output.renderers import render_result
from usecasectl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, /, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Console ───────────────────────────────────────────────────────────


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello [bold]world[/bold]")
        assert get_output(console) == "hello [bold]world[/bold]\n"

    def test_goal_level_styles(self) -> None:
        assert style_for_goal_level("USER_GOAL") == "uc.level.USER_GOAL"
        assert style_for_goal_level("Epic") == ""


# ── Errors ────────────────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("show", "NOT_FOUND", "Use case not found: uc-9"))
        assert "ERROR" in output
        assert "show" in output
        assert "Use case not found: uc-9" in output

    def test_validation_errors_listed(self) -> None:
        result = _err(
            "create",
            "VALIDATION_FAILED",
            "Use case validation failed:\n  - title: Title cannot be empty",
            errors=[
                {
                    "field": "title",
                    "message": "Title cannot be empty",
                    "example": "Example: 'Purchase Items'",
                }
            ],
        )
        lines = render_result(result).splitlines()
        assert lines[0].endswith("Use case validation failed")
        assert "title: Title cannot be empty" in lines[1]
        assert "Example: 'Purchase Items'" in lines[2]

    def test_schema_violations_listed(self) -> None:
        result = _err(
            "create",
            "SCHEMA_INVALID",
            "Schema validation failed: goalLevel: 'x' is not one of ...",
            violations=["goalLevel: 'x' is not one of ..."],
        )
        output = render_result(result)
        assert "  - goalLevel: 'x' is not one of ..." in output

    def test_verbose_shows_storage_context(self) -> None:
        result = _err("create", "STORAGE_ERROR", "Failed", op="save", target="/tmp/x.json")
        assert "/tmp/x.json" not in render_result(result)
        output = render_result(result, verbose=True)
        assert "op: save" in output
        assert "target: /tmp/x.json" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="list"))


# ── Success views ─────────────────────────────────────────────────────


class TestListRenderer:
    def test_table(self) -> None:
        items = [
            {"id": "uc-1", "title": "Add Item", "primary_actor": "Clerk", "goal_level": "SUBFUNCTION"},
            {"id": "uc-2", "title": "Purchase Items", "primary_actor": "Customer", "goal_level": "USER_GOAL"},
        ]
        output = render_result(_ok("list", count=2, items=items))
        assert "Add Item" in output
        assert "Customer" in output
        assert "USER_GOAL" in output
        assert "2 use case(s)" in output
        assert "uc-1" not in output

    def test_verbose_adds_ids(self) -> None:
        items = [{"id": "uc-1", "title": "Add Item", "primary_actor": "Clerk", "goal_level": "SUMMARY"}]
        assert "uc-1" in render_result(_ok("list", count=1, items=items), verbose=True)

    def test_empty(self) -> None:
        assert "No use cases found." in render_result(_ok("list", count=0, items=[]))


class TestDocumentRenderer:
    def test_full_document(self) -> None:
        doc = {
            "id": "uc-1",
            "title": "Purchase Items",
            "primaryActor": "Customer",
            "goalLevel": "USER_GOAL",
            "designScope": "Online Store",
            "trigger": "Customer opens the cart",
            "preconditions": ["Customer is logged in"],
            "postconditions": [],
            "successGuarantees": ["Order is recorded"],
            "mainScenario": {"steps": [{"number": 1, "actor": "Customer", "action": "selects items"}]},
            "extensions": [
                {
                    "condition": "Card declined",
                    "branchPoint": 1,
                    "steps": [{"number": 1, "actor": "System", "action": "shows an error"}],
                }
            ],
            "stakeholders": ["Customer"],
        }
        output = render_result(_ok("show", id="uc-1", use_case=doc))
        assert output.splitlines()[0] == "Purchase Items"
        assert "primary actor: Customer" in output
        assert "Preconditions:" in output
        assert "Postconditions:" not in output
        assert "1. Customer selects items" in output
        assert "1a. Card declined" in output
        assert "1. System shows an error" in output


class TestMutationAndCheckRenderers:
    def test_create(self) -> None:
        output = render_result(_ok("create", id="uc-1", title="Purchase Items", path="/s/uc-1.json"))
        assert output.splitlines()[0] == "OK create"
        assert "id: uc-1" in output
        assert "path: /s/uc-1.json" in output

    def test_delete(self) -> None:
        output = render_result(_ok("delete", id="uc-1", title="Purchase Items", deleted=False))
        assert "deleted: False" in output

    def test_lint(self) -> None:
        output = render_result(_ok("lint", field="title", text="Purchase Items", valid=True))
        assert "OK lint" in output
        assert "field: title" in output
        assert "valid" in output

    def test_unknown_op_generic(self) -> None:
        output = render_result(_ok("custom", answer=42))
        assert "OK custom" in output
        assert "answer: 42" in output
