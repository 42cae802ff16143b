RIDEABLE = 'Rideable'
NOT_RIDEABLE = 'Not Rideable'
CAUTION = 'Caution'
UNKNOWN = 'Unknown'

WET_PRECIP_IN = 0.1
COLD_TEMP_F = 35
NO_DATA = 'No data available'


def determine_rideability(precip_in, condition_text, temp_f):
    """
    Rideability from current precipitation (in), condition text and temp (°F).

    Rules are checked in order and the first match wins:
      precip > 0.1in          -> Not Rideable, Wet/Muddy
      'snow' / 'storm' in text -> Not Rideable, Snow/Ice or Stormy
      temp < 35°F             -> Caution, Very Cold
      otherwise               -> Rideable
    Returns (status, condition_details).
    """
    if precip_in is None or condition_text is None or temp_f is None:
        return UNKNOWN, NO_DATA

    text = str(condition_text).lower()
    if precip_in > WET_PRECIP_IN:
        return NOT_RIDEABLE, 'Wet/Muddy'
    if 'snow' in text or 'storm' in text:
        return NOT_RIDEABLE, 'Snow/Ice or Stormy'
    if temp_f < COLD_TEMP_F:
        return CAUTION, 'Very Cold'
    return RIDEABLE, 'Dry or Minimal Moisture'


def classify_current(weather):
    """Classify a current.json response; missing fields give Unknown."""
    current = (weather or {}).get('current') or {}
    condition = (current.get('condition') or {}).get('text')
    return determine_rideability(current.get('precip_in'), condition, current.get('temp_f'))
