"""Show configuration command."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .AppUriConfig import AppUriConfig
from .get_config_path import get_config_path


def cmd_show(section: str = "") -> StageResult:
    """Show configuration section or list all sections.

    Args:
        section: Section name. Empty string lists all section names, otherwise returns specific section.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = AppUriConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = "Failed to load configuration"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                section=section,
                content={},
                config_path=str(get_config_path()),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        available_sections = list(config_dict.keys())
        errors: list[str] = []
        warnings: list[str] = []
        if not get_config_path().exists():
            warnings.append(f"No config file at {get_config_path()}, showing defaults")

        if section == "":
            content = {"sections": available_sections}
            result_obj.result = f"Found {len(available_sections)} section(s)"
        elif section not in available_sections:
            errors.append(f"Unknown section: {section}")
            content = {}
            result_obj.result = f"Section '{section}' not found"
        else:
            content = config_dict[section]
            result_obj.result = f"Retrieved configuration for '{section}'"

        yield (1.0, "Complete")
        result_obj.output = ConfigShowOutput(
            errors=errors,
            warnings=warnings,
            section=section,
            content=content,
            config_path=str(get_config_path()),
        ).model_dump(mode="python")
        result_obj.success = len(errors) == 0

    announce = "Listing configuration sections..." if section == "" else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
