from datetime import date

from ..schemas.enums import AgeBand


def calculate_age(birth_date: date, today: date) -> int:
    had_birthday = (today.month, today.day) >= (birth_date.month, birth_date.day)
    return today.year - birth_date.year - (0 if had_birthday else 1)


def calculate_age_band(birth_date: date, today: date | None = None) -> AgeBand:
    age = calculate_age(birth_date, today or date.today())
    if age <= 17:
        return AgeBand.TEEN
    if age <= 29:
        return AgeBand.PRIME
    if age <= 39:
        return AgeBand.BUILD
    if age <= 49:
        return AgeBand.REBUILD
    if age <= 59:
        return AgeBand.STRONG50
    return AgeBand.ACTIVE60
