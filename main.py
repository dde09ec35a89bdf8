#!/usr/bin/env python3
"""
Main script for running a demonstration of the food-science analyses.
"""

# Pipeline overview (README-style):
# 1) Score a three-sample sensory panel on five attributes.
# 2) Run one-way ANOVA per attribute and Duncan grouping where significant.
# 3) Extrapolate shelf life with the Q10 and Arrhenius models.
# 4) Screen a dried product with the water-activity risk model.

import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from savory import (
    InsufficientData,
    KineticTestPoint,
    analyze_sensory_panel,
    arrhenius_predict,
    assess_water_activity,
    q10_predict,
)
from savory.reporting import anova_table, duncan_table, panel_summary_table

PANEL_SCORES = {
    "Formula A": {
        "color": [7, 8, 6, 7, 8, 7, 6, 8],
        "odor": [6, 7, 6, 7, 6, 7, 7, 6],
        "taste": [8, 8, 7, 9, 8, 8, 7, 8],
        "texture": [7, 6, 7, 7, 6, 7, 6, 7],
        "overall": [8, 7, 8, 8, 7, 8, 8, 7],
    },
    "Formula B": {
        "color": [6, 6, 7, 6, 5, 6, 7, 6],
        "odor": [6, 6, 7, 6, 7, 6, 6, 7],
        "taste": [6, 5, 6, 6, 5, 6, 7, 5],
        "texture": [7, 7, 6, 7, 7, 6, 7, 6],
        "overall": [6, 6, 5, 6, 7, 6, 5, 6],
    },
    "Formula C": {
        "color": [5, 4, 5, 5, 4, 6, 5, 4],
        "odor": [7, 6, 6, 7, 6, 6, 7, 6],
        "taste": [6, 6, 5, 6, 6, 7, 5, 6],
        "texture": [6, 7, 7, 6, 7, 7, 6, 7],
        "overall": [5, 5, 6, 4, 5, 5, 6, 5],
    },
}

ARRHENIUS_POINTS = [
    KineticTestPoint(45.0, 7.0),
    KineticTestPoint(35.0, 21.0),
    KineticTestPoint(25.0, 60.0),
]


def main():
    """Main execution function with comprehensive technical logging."""

    start_time = time.time()
    logging.info("Initializing food-science analysis pipeline")

    step_start = time.time()
    panel = analyze_sensory_panel(PANEL_SCORES, alpha=0.05)
    step_duration = time.time() - step_start
    if isinstance(panel, InsufficientData):
        logging.error("Sensory panel could not be analyzed: %s", panel.reason)
        return 1
    logging.info(
        "Sensory panel analysis completed in %.4f seconds (%d attributes)",
        step_duration,
        len(panel),
    )

    logging.info("Panel summary:\n%s", panel_summary_table(panel).to_string(index=False))
    for analysis in panel.values():
        logging.info(
            "%s ANOVA:\n%s",
            analysis.attribute.name,
            anova_table(analysis.anova).to_string(index=False),
        )
        if analysis.duncan is not None:
            logging.info(
                "%s Duncan groups:\n%s",
                analysis.attribute.name,
                duncan_table(analysis.duncan).to_string(index=False),
            )

    q10 = q10_predict(30.0, known_temp_c=35.0, target_temp_c=25.0, q10=2.0)
    logging.info(
        "Q10 prediction: %.0f days (%.1f weeks, factor %.2f)",
        q10.predicted_days,
        q10.predicted_weeks,
        q10.factor,
    )

    arrhenius = arrhenius_predict(ARRHENIUS_POINTS, target_temp_c=25.0)
    if isinstance(arrhenius, InsufficientData):
        logging.warning("Arrhenius model skipped: %s", arrhenius.reason)
    else:
        logging.info(
            "Arrhenius prediction: %.0f days (Ea=%.2f kJ/mol, A=%.2e, R2=%.4f)",
            arrhenius.predicted_days,
            arrhenius.ea_kj_mol,
            arrhenius.a,
            arrhenius.r_squared,
        )

    assessment = assess_water_activity(
        aw=0.45,
        ph=5.5,
        temperature_c=25.0,
        preservatives=False,
        packaging="vacuum",
        product_type="dried",
    )
    logging.info(
        "Water activity assessment: %d days, risk %s (%s: %s)",
        assessment.predicted_days,
        assessment.risk_label,
        assessment.aw_category.name,
        assessment.aw_category.organisms_note,
    )
    for note in assessment.recommendations:
        logging.info("  - Recommendation: %s", note)
    for note in assessment.risk_factors:
        logging.warning("  - Risk factor: %s", note)

    total_duration = time.time() - start_time
    logging.info("Total execution time: %.2f seconds", total_duration)
    logging.info("Analysis pipeline completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
