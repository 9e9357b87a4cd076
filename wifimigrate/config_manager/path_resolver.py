"""
Path resolution for wifimigrate files.

Relative paths are looked up in the working directory first, then in the
project directory.
"""

from pathlib import Path
from typing import Union


class PathResolver:
    """
    Resolution order:
    1. Absolute paths → use as-is
    2. Relative paths → check working dir first, then project dir
    3. For creation → prefer working dir
    """

    @staticmethod
    def get_project_root() -> Path:
        """wifimigrate/config_manager/path_resolver.py -> project root."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def resolve(
        path: Union[str, Path],
        create_if_missing: bool = False,
        must_exist: bool = False,
    ) -> Path:
        """
        Resolve a config, store or transfer path.

        Args:
            path: Path to resolve (str or Path object)
            create_if_missing: If True, return the working dir location for relative paths
            must_exist: If True, raise FileNotFoundError if path doesn't exist

        Returns:
            Resolved Path object

        Raises:
            FileNotFoundError: If must_exist=True and path not found in any location

        Examples:
            config_path = PathResolver.resolve("wifimigrate.yaml")
            output_dir = PathResolver.resolve("transfer", create_if_missing=True)
        """
        path = Path(path).expanduser()

        if path.is_absolute():
            if must_exist and not path.exists():
                raise FileNotFoundError(f"Path not found: {path}")
            return path

        cwd_path = Path.cwd() / path
        project_path = PathResolver.get_project_root() / path

        if create_if_missing:
            return cwd_path

        if cwd_path.exists():
            return cwd_path
        if project_path.exists():
            return project_path

        if must_exist:
            raise FileNotFoundError(
                f"Path not found in:\n"
                f"  - Working dir: {cwd_path}\n"
                f"  - Project dir: {project_path}"
            )

        return cwd_path
