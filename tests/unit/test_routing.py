import pytest

from cfworkers.modules.common.exceptions import AccountIdRequiredError
from cfworkers.modules.common.routing import (
    WorkerMode,
    resolve_list_mode,
    resolve_route_mode,
    resolve_script_mode,
    route_collection_path,
    script_path,
    scripts_collection_path,
)
from cfworkers.modules.routes import WorkerRoute


def test_script_name_selects_multi_script_mode():
    assert resolve_script_mode("bar", "foo") is WorkerMode.MULTI_SCRIPT


def test_missing_script_name_selects_single_script_mode():
    assert resolve_script_mode("", "") is WorkerMode.SINGLE_SCRIPT
    assert resolve_script_mode("", "foo") is WorkerMode.SINGLE_SCRIPT


def test_script_name_without_account_is_rejected():
    with pytest.raises(AccountIdRequiredError):
        resolve_script_mode("bar", "")


def test_route_mode_follows_route_script():
    assert resolve_route_mode(WorkerRoute(pattern="a/*"), "") is WorkerMode.SINGLE_SCRIPT
    assert resolve_route_mode(WorkerRoute(pattern="a/*", script="s"), "foo") is WorkerMode.MULTI_SCRIPT
    with pytest.raises(AccountIdRequiredError):
        resolve_route_mode(WorkerRoute(pattern="a/*", script="s"), "")


def test_list_mode_depends_only_on_account():
    assert resolve_list_mode("") is WorkerMode.SINGLE_SCRIPT
    assert resolve_list_mode("foo") is WorkerMode.MULTI_SCRIPT


def test_script_paths():
    assert script_path(WorkerMode.SINGLE_SCRIPT, zone_id="z") == "/zones/z/workers/script"
    assert (
        script_path(WorkerMode.MULTI_SCRIPT, zone_id="z", script_name="bar", account_id="foo")
        == "/accounts/foo/workers/scripts/bar"
    )
    assert scripts_collection_path("foo") == "/accounts/foo/workers/scripts"
    with pytest.raises(AccountIdRequiredError):
        scripts_collection_path("")


def test_route_collection_paths():
    assert route_collection_path(WorkerMode.SINGLE_SCRIPT, "z") == "/zones/z/workers/filters"
    assert route_collection_path(WorkerMode.MULTI_SCRIPT, "z") == "/zones/z/workers/routes"
