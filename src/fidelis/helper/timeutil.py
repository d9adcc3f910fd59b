import iso8601
from datetime import date, datetime, timezone
from fidelis import config

EPOCH = datetime.fromtimestamp(0, timezone.utc)


def timestamp():
    return datetime.now(timezone.utc)


def epoch_ms(dt):
    if not isinstance(dt, datetime):
        return -1

    return int((dt - EPOCH).total_seconds() * 1000)


def datetime_to_str(dt, fmstr=config.EXCHANGE_DATE_FORMAT):
    try:
        return datetime.strftime(dt, fmstr)
    except (ValueError, TypeError):
        return None


def parse_date(value, *formats):
    ''' Try each strptime format in turn, then ISO 8601.
        Unparseable values yield None instead of raising.
    '''
    if value is None or value == '':
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    text = str(value).strip()
    for fmstr in formats:
        try:
            return datetime.strptime(text, fmstr).date()
        except ValueError:
            continue

    try:
        return iso8601.parse_date(text).date()
    except iso8601.ParseError:
        return None


def parse_bureau_date(value, fmstr=config.BUREAU_DATE_FORMAT):
    ''' Bureau dates are compact (YYYYMMDD) but some feeds send ISO strings. '''
    return parse_date(value, fmstr)
