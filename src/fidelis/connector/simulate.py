''' Synthesized records used when every live and cached source failed. '''
import random

from . import config


def pan_rng(pan):
    ''' A generator seeded by the PAN, so a PAN always simulates the same way. '''
    return random.Random(f"fidelis:{pan}")


def simulated_score(rng=None):
    rng = rng or random.Random()
    return rng.randint(config.SIMULATED_SCORE_MIN, config.SIMULATED_SCORE_MAX)


def simulated_name(pan):
    return f"{config.SIMULATED_NAME_PREFIX} {pan[5:9]}"


def simulated_identity(pan):
    name = simulated_name(pan)
    first_name, _, last_name = name.partition(' ')
    return {
        "legal_name": name,
        "first_name": first_name,
        "last_name": last_name,
        "date_of_birth": config.SIMULATED_DATE_OF_BIRTH,
        "gender_code": config.SIMULATED_GENDER_CODE,
        "credit_score": simulated_score(pan_rng(pan)),
    }


def simulated_vehicle(registration_number, owner_name=None):
    return {
        "registration_number": registration_number,
        "make": config.SIMULATED_VEHICLE_MAKE,
        "model": config.SIMULATED_VEHICLE_MODEL,
        "year": config.SIMULATED_VEHICLE_YEAR,
        "fuel_type": config.SIMULATED_VEHICLE_FUEL,
        "color": config.SIMULATED_VEHICLE_COLOR,
        "owner_name": owner_name or config.SIMULATED_OWNER_NAME,
        "city": config.DEFAULT_CITY,
        "market_value": config.DEFAULT_MARKET_VALUE,
    }
