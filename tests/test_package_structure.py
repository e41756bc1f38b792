"""
Test package structure and basic imports.

This test module verifies that the package is properly structured
and all modules can be imported without errors.
"""

import pytest
import sys
from pathlib import Path

# Add the project root to the path for testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def test_main_package_import():
    """Test that the main querystring package can be imported."""
    import querystring

    # Check basic attributes
    assert hasattr(querystring, '__version__')
    assert hasattr(querystring, '__author__')
    assert hasattr(querystring, 'encode')
    assert hasattr(querystring, 'Converter')


def test_public_api_imports():
    """Test that the public encoder API can be imported."""
    from querystring import (
        QueryEncoder,
        Converter,
        encode,
        values,
        Tag,
        DefaultTag,
        Directive,
        TagOptions,
        new_tag,
        url_field,
        describe_fields,
        Values,
        NameCase,
        convert_name,
    )

    assert QueryEncoder is not None
    assert Converter is not None
    assert callable(encode)
    assert callable(values)
    assert Tag is not None
    assert DefaultTag is not None
    assert Directive is not None
    assert TagOptions is not None
    assert callable(new_tag)
    assert callable(url_field)
    assert callable(describe_fields)
    assert issubclass(Values, dict)
    assert NameCase is not None
    assert callable(convert_name)


def test_utils_imports():
    """Test that utility submodules can be imported."""
    from querystring.utils import (
        setup_logging,
        get_logger,
        EncoderLogger,
        QueryStringError,
        UnsupportedTypeError,
        TypeMismatchError,
        EncoderFailureError,
        EncoderOptions,
        get_config,
    )

    assert setup_logging is not None
    assert get_logger is not None
    assert EncoderLogger is not None
    assert issubclass(UnsupportedTypeError, QueryStringError)
    assert issubclass(TypeMismatchError, QueryStringError)
    assert issubclass(EncoderFailureError, QueryStringError)
    assert EncoderOptions is not None
    assert get_config is not None


def test_package_structure():
    """Test that the package directory structure is correct."""
    package_path = project_root / 'querystring'

    # Check main package directory exists
    assert package_path.exists()
    assert (package_path / '__init__.py').exists()

    modules = ['encoder.py', 'tag.py', 'fields.py', 'kinds.py', 'collection.py']
    for module in modules:
        assert (package_path / module).exists(), f"Module {module} not found"

    utils_path = package_path / 'utils'
    assert (utils_path / '__init__.py').exists(), "Subpackage utils missing __init__.py"


def test_configuration_files():
    """Test that configuration files are present."""
    config_files = [
        'setup.py',
    ]

    for config_file in config_files:
        file_path = project_root / config_file
        assert file_path.exists(), f"Configuration file {config_file} not found"


if __name__ == '__main__':
    pytest.main([__file__])
