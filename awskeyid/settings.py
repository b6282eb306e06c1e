# Meaningful values: 'minimal', 'low', 'high'
# 'Minimal' will only add tracebacks to error log files.
# 'Low' will also add the command line arguments the error happened with.
# 'High' will dump the local variables of the last two stack frames of every
# traceback. Key IDs are not secret but the frames may hold whatever else
# was loaded at the time, use with caution.
from pathlib import Path

ERROR_LOG_VERBOSITY = 'minimal'

home_dir = Path('~/.local/share/awskeyid')

ERROR_LOG_FILE_NAME = 'error_log.txt'
