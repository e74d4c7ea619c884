"""Tests for the format_result dispatcher and OutputSettings."""

import json

from onionctl.output.formatters import OutputSettings, format_result
from onionctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail", **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg, detail=dict(detail)),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.no_color is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(
            _ok("add_node", name="User"), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "add_node"
        assert data["data"]["name"] == "User"

    def test_json_mode_error(self) -> None:
        output = format_result(
            _err("validate", "Bad", errors=["e1"]), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"
        assert data["error"]["detail"]["errors"] == ["e1"]


class TestFormatResultHuman:
    def test_ok_header_and_fields(self) -> None:
        output = format_result(_ok("init", path="onion-config.json", valid=True))
        lines = output.splitlines()
        assert lines[0] == "OK: init"
        assert "  path: onion-config.json" in lines
        assert "  valid: True" in lines

    def test_collections_rendered_compact(self) -> None:
        output = format_result(_ok("targets", targets=["User", "Product"]))
        assert '  targets: ["User","Product"]' in output.splitlines()

    def test_quiet_only_header(self) -> None:
        output = format_result(_ok("init", path="x"), settings=OutputSettings(quiet=True))
        assert output == "OK: init"

    def test_error_lists_violations(self) -> None:
        output = format_result(
            _err(
                "validate",
                "2 violation(s)",
                errors=[
                    'Invalid dependency "[X]" in domainService "S".',
                    "`uiFramework` is required.",
                ],
            )
        )
        lines = output.splitlines()
        assert lines[0] == "ERROR: validate - 2 violation(s)"
        assert '  - Invalid dependency "[X]" in domainService "S".' in lines
        assert "  - `uiFramework` is required." in lines

    def test_nodes_table(self) -> None:
        nodes = [
            {"name": "User", "ring": "Entities", "targets": []},
            {"name": "UserService", "ring": "Domain Services", "targets": ["User"]},
        ]
        output = format_result(_ok("list_nodes", nodes=nodes, count=2))
        assert "Ring" in output
        assert "UserService" in output
        assert "Domain Services" in output
        assert "  count: 2" in output.splitlines()
