import sys


class Logger:
    """
    Routes trace messages to output streams according to their category.
    Messages of a category without a stream are dropped.

    The categories reported by this package are:
    - "overflow": an operation whose bounds did not fit the bit-width.
    - "widening": a bound that was widened.
    - "guard": a guard that cannot hold.
    - "cast": a truncation that could not preserve the interval.
    - "build": elements created from program values.
    """
    def __init__(self, filters):
        """
        :param dict[str, file] filters: The stream of each category to
            report.
        """
        self.filters = filters

    @staticmethod
    def with_std_output(filters):
        """
        :param list[str] filters: The categories to print on the standard
            output.
        :rtype: Logger
        """
        return Logger({f: sys.stdout for f in filters})

    def log(self, category, msg):
        output = self.filters.get(category)
        if output is not None:
            output.write(msg)
            output.flush()


# reports nothing until set_logger is called
_global_logger = Logger({})


def set_logger(logger):
    """
    Replaces the logger used by every module of this package.
    :param Logger logger: The new logger.
    """
    global _global_logger
    _global_logger = logger


def get_logger():
    return _global_logger


def log(category, msg):
    """
    Reports a one-line message through the current logger. The newline is
    added here.
    """
    _global_logger.log(category, msg + '\n')
