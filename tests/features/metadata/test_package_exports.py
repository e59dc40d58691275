"""tests/features/metadata/test_package_exports.py
What: Validate metadata packages expose the façade, ports and helpers.
Why: Prevent regressions when modules move between subpackages.
"""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    ("module_name", "expected_names"),
    [
        (
            "trackform.features.metadata",
            {
                "FFmpegMetadataService",
                "MetadataRecord",
                "ReplaceStrategy",
                "MetadataEvent",
                "AccessDeniedError",
                "ExecutionError",
                "OutputMissingError",
                "ReplaceFailedError",
            },
        ),
        (
            "trackform.features.metadata.usecases",
            {
                "FFmpegMetadataService",
                "FilesystemPort",
                "ProcessRunnerPort",
                "build_read_arguments",
                "build_write_arguments",
                "parse_ffmetadata",
            },
        ),
        ("trackform.features.metadata.adapters", {"LocalFilesystemAdapter"}),
        (
            "trackform.platform.ffmpeg",
            {"ProcessOutput", "SubprocessRunner", "resolve_tool_path"},
        ),
    ],
)
def test_package_exports(module_name: str, expected_names: set[str]) -> None:
    module = import_module(module_name)

    for name in expected_names:
        assert hasattr(module, name), f"Missing export: {name}"
        assert name in module.__all__, f"{name} not listed in __all__"
