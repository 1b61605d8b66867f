"""
Default QC thresholds for rendered signals.
"""
QC_THRESHOLDS = {
    "peak_max": 10.0,  # Warn when max |y| exceeds this
    "dc_max": 0.25,  # Warn when |mean(y)| exceeds this
    "nonzero_fraction_min": 0.0,  # Warn when fewer samples than this are nonzero
}
