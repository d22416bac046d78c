from .loader import parse_value, load_ini_file, load_json_file, load_config_file
from .options import FormatOptions, load_format_options

__all__ = [
	"FormatOptions",
	"load_format_options",
	"parse_value",
	"load_ini_file",
	"load_json_file",
	"load_config_file",
]
