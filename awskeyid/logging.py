import os
import time
import traceback
from typing import List, Optional

from awskeyid import settings
from awskeyid.core.lib import home_dir


def error_log_path() -> str:
    return os.path.join(str(home_dir()), settings.ERROR_LOG_FILE_NAME)


def log_error(text, exception_info=None, args: Optional[List[str]] = None, local_data: Optional[List[str]] = None) -> None:
    """ Write an error to the awskeyid error log in the home directory and
    tell the user where to find it. What is written besides the traceback
    text depends on settings.ERROR_LOG_VERBOSITY. """

    timestamp = time.strftime('%F %T', time.gmtime())

    try:
        log_file_path = error_log_path()

        print('\n[{}] awskeyid encountered an error. Check {} for technical '
              'details. [LOG LEVEL: {}]\n\n    {}\n'.format(timestamp, log_file_path,
                                                            settings.ERROR_LOG_VERBOSITY.upper(), exception_info))

        formatted_text = '[{}] {}'.format(timestamp, text)

        if settings.ERROR_LOG_VERBOSITY.lower() in ('low', 'high'):
            if args is not None:
                formatted_text += 'ARGUMENTS:\n    {}\n'.format(' '.join(args))

        if settings.ERROR_LOG_VERBOSITY.lower() == 'high':
            if local_data is not None:
                formatted_text += '\nLAST TWO FRAMES LOCALS DATA:\n    {}\n'.format('\n\n    '.join(local_data[-2:]))

        formatted_text += '\n'

        with open(log_file_path, 'a+') as log_file:
            log_file.write(formatted_text)

    except Exception as error:
        print('Error while saving exception information. This means the exception was not added to the error log '
              'and should most likely be provided to the developers.\n    Exception raised: {}'.format(str(error)))
        raise


def get_data_from_traceback(tb) -> List[str]:
    local_data_in_all_frames = list()

    for frame, line_number in traceback.walk_tb(tb):
        try:
            local_data_in_all_frames.append(str(frame.f_locals))
        except Exception as error:
            # A local whose repr raises must not stop the error from being logged.
            local_data_in_all_frames.append('<locals unavailable: {}: {}>'.format(type(error).__name__, error))

    return local_data_in_all_frames
