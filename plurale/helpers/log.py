import logging

def configure(level='info', colored=False):
    '''
    Configure logging with custom format and optionally colorize it by
    special ANSI escape sequences
    '''

    # define const
    reset = "\033[0m"
    set_bold = "\033[1m"
    set_color = "\033[{0}m"
    black, red, green, yellow, blue, magenta, cyan, white = range(8)

    # set colors
    colors = {
        'INFO': green,
        'DEBUG': cyan,
        'ERROR': red,
        'WARNING': yellow,
        'CRITICAL': magenta,
        'NOTSET': blue
    }

    # define colorizer
    class ColoredFormatter(logging.Formatter):
        def format(self, record):
            color = 30 + colors.get(record.levelname, blue)
            record.color = set_color.format(color)
            return super(ColoredFormatter, self).format(record)

    # change level
    log_level = getattr(logging, level.upper())

    # change format
    if colored:
        fmt = '{0}{1}[{2} {3}]{4}{0} {5}{4}'.format(
            '%(color)s', set_bold, '%(asctime)-15s',
            '%(levelname)s', reset, '%(message)s'
        )
        formatter_class = ColoredFormatter
    else:
        fmt = '[%(asctime)-15s %(levelname)s] %(message)s'
        formatter_class = logging.Formatter

    # configure, keeping handlers someone else already installed
    root = logging.getLogger()
    root.setLevel(log_level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter_class(fmt, '%m-%d-%Y %H:%M:%S'))
        root.addHandler(handler)
