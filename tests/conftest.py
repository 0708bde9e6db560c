import pytest

# Raw instruction -> expected Taglish, for every accepted shape.
ACCEPTED = {
    "take 1 tablet every 8 hours.": "Uminom ng isang tableta bawat 8 oras.",
    "take 1 tablet.": "Uminom ng isang tableta.",
    "apply patch once a day.": "Ipahid ang patch isang beses sa isang araw.",
    "apply patch daily.": "Ipahid ang patch araw-araw.",
    "take 1 tablet every 4 hours as needed.": "Uminom ng isang tableta bawat 4 oras kung kinakailangan.",
    "take 1 tablet every 4 hours as needed as needed.":
        "Uminom ng isang tableta bawat 4 oras kung kinakailangan kung kinakailangan.",
    "inhale 2 puffs as needed.": "Langhapin ng dalawang puffs kung kinakailangan.",
    "use 1 spray at night as needed.": "Gamitin ng isang isprey sa gabi kung kinakailangan.",
    "Take 1 tablet q8h": "Uminom ng isang tableta bawat 8 oras.",
    "take 1 tablet bid": "Uminom ng isang tableta dalawang beses sa isang araw.",
    "take 1 tablet qd": "Uminom ng isang tableta bawat araw.",
    "take 1 tablet prn": "Uminom ng isang tableta kung kinakailangan.",
    "take 1 tablet q4h prn": "Uminom ng isang tableta bawat 4 oras kung kinakailangan.",
    "swallow 1 capsule hs": "Lunukin ng isang kapsula bago matulog.",
}


@pytest.fixture(params=sorted(ACCEPTED))
def accepted(request):
    """(raw instruction, expected translation) for each accepted shape."""
    return request.param, ACCEPTED[request.param]
