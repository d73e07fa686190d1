import pytest

from godependants.utils import PackagePathError, clean_package_path


def test_clean_relative_path():
    assert clean_package_path("./sub/pkg", "example.com/app") == "example.com/app/sub/pkg"


def test_clean_module_root():
    assert clean_package_path("./", "example.com/app") == "example.com/app"


def test_clean_normalises_path():
    assert clean_package_path("./a//b/../c", "example.com/app") == "example.com/app/a/c"


def test_clean_passes_full_import_path_through():
    assert clean_package_path("github.com/x/lib", "example.com/app") == "github.com/x/lib"
    assert clean_package_path("sub/pkg", "example.com/app") == "sub/pkg"


def test_clean_rejects_empty_argument():
    with pytest.raises(PackagePathError):
        clean_package_path("  ", "example.com/app")
