"""
Constants declarations for chinacoords
"""

import math

# Krasovsky 1940 Ellipsoid Constants, as used by the national obfuscation
KRASOVSKY_A = 6378245.0  # Major axis (meters)
KRASOVSKY_EE = 0.00669342162296594323  # Eccentricity squared

# Origin of the distortion offsets
REFERENCE_LONGITUDE = 105.0
REFERENCE_LATITUDE = 35.0

# Approximate bounding box of the obfuscation region
REGION_MIN_LONGITUDE = 72.004
REGION_MAX_LONGITUDE = 137.8347
REGION_MIN_LATITUDE = 0.8293
REGION_MAX_LATITUDE = 55.8271

# Provider polar re-encoding
PROVIDER_X_PI = math.pi * 3000.0 / 180.0
PROVIDER_LONGITUDE_OFFSET = 0.0065
PROVIDER_LATITUDE_OFFSET = 0.006
PROVIDER_RADIUS_PERTURBATION = 0.00002
PROVIDER_ANGLE_PERTURBATION = 0.000003
