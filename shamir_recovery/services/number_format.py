# str(int) refuses values over sys.get_int_max_str_digits() (4300 by default),
# so large values are rendered in chunks that each stay under the limit.
CHUNK_DIGITS = 1000
CHUNK = 10 ** CHUNK_DIGITS


def to_decimal(number: int) -> str:
    if number < 0:
        return "-" + to_decimal(-number)

    chunks = []
    while number >= CHUNK:
        number, chunk = divmod(number, CHUNK)
        chunks.append(str(chunk).zfill(CHUNK_DIGITS))
    chunks.append(str(number))
    return "".join(reversed(chunks))
