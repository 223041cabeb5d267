"""
Pricing Configuration

Closed-form constants behind the base rate, transit time and emissions
estimates. Figures are illustrative, not contract rates.
"""

# Base rate
WEIGHT_RATE = 0.8             # Per kg of actual weight
VOLUME_RATE = 50              # Per cubic meter
BASE_FEE = 50                 # Flat fee added to every quote
MIN_PRICE = 25                # Price floor after rounding

# Density (dimensional weight) adjustment
DIM_FACTOR = 167              # kg per cubic meter
DENSITY_FLOOR = 0.6           # Never bill below 0.6x the linear term

# Distance adjustment: ln(distance + offset) / damping
DISTANCE_OFFSET_KM = 20
DISTANCE_DAMPING = 5

# Service level speed hint acts as a floor on transit days
SPEED_HINT_FLOOR = 0.6

# Per-carrier perturbation (carrier i in roster order)
CARRIER_PRICE_STEP = 0.05     # Price multiplier scaled by (1 + i * step)
CARRIER_ETA_STEP_DAYS = 1     # ETA increased by i * step days
CARRIER_CO2E_STEP = 0.03      # CO2e scaled by (1 + i * step)

# Lower-emission filter keeps quotes within this factor of the cleanest
LOWER_EMISSION_TOLERANCE = 1.2
