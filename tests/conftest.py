import pytest

from godependants.types import PackageRecord


def _record(id, imports=(), dep_only=False, module=None):
    data = {"ImportPath": id, "Imports": list(imports), "DepOnly": dep_only}
    if module:
        data["Module"] = {"Path": module}
    return PackageRecord.model_validate(data)


@pytest.fixture
def make_record():
    return _record


@pytest.fixture
def scenario_records():
    """Module example.com/app with two packages sharing one external library"""
    return [
        _record("example.com/app/a", ["fmt", "github.com/x/lib"], module="example.com/app"),
        _record("example.com/app/b", ["github.com/x/lib"], module="example.com/app"),
        _record("fmt", ["io"], dep_only=True),
        _record("io", dep_only=True),
        _record("github.com/x/lib", ["github.com/y/core"], dep_only=True, module="github.com/x/lib"),
        _record("github.com/y/core", ["strings"], dep_only=True, module="github.com/y/core"),
        _record("strings", dep_only=True),
    ]
