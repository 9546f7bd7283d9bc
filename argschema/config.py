import os
import shlex

# Analyzer command used by the CLI when --parser isn't given, e.g. "windmill-parser --json".
PARSER_COMMAND = shlex.split(os.environ.get("ARGSCHEMA_PARSER", ""))

LOG_LEVEL = os.environ.get("ARGSCHEMA_LOG_LEVEL", "WARNING").upper()
