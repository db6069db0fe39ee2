import os

class Constants():
    CHECK_REP_ENV = "WGRAPH_CHECK_REP"
    CHECK_REP_DEFAULT = True

    @staticmethod
    def check_rep_enabled() -> bool:
        """Whether graphs verify their representation after every mutation."""
        value = os.environ.get(Constants.CHECK_REP_ENV)
        if value is None:
            return Constants.CHECK_REP_DEFAULT
        return value.strip().lower() not in {"0", "false", "no", "off"}
