# utils/payload_loader.py - logger setup and CSV loader for conversion test cases
import csv
import logging


def get_logger(name: str = "api-tests"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def _coerce(value, cast):
    try:
        return cast(value)
    except (TypeError, ValueError):
        return value


def load_conversion_cases(csv_path):
    """Read id,user_id,from_currency,to_currency,amount rows; blank rows are skipped."""
    rows = []
    with open(csv_path, newline='', encoding='utf-8') as fh:
        reader = csv.DictReader(fh)
        for r in reader:
            r = {k: (v.strip() if isinstance(v, str) else v) for k, v in r.items()}
            if not any(r.get(k) for k in ("user_id", "from_currency", "to_currency", "amount")):
                continue
            rows.append({
                'id': r.get('id') or r.get('TestCaseID') or '',
                'user_id': _coerce(r.get('user_id'), int),
                'from_currency': r.get('from_currency') or '',
                'to_currency': r.get('to_currency') or '',
                'amount': _coerce(r.get('amount'), float),
            })
    return rows
