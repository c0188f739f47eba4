from ...domain.exceptions import TabstatError


class TabstatInfrastructureError(TabstatError):
    pass


class DataSourceError(TabstatInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class UnexpectedEndOfInputError(DataParseError):
    pass
