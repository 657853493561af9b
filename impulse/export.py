"""
Waveform export as CSV (for spreadsheets and plotting) or JSON.
"""

import csv
import io
import json

from impulse.models import WaveformResult


def export_csv(result: WaveformResult) -> str:
    """Export samples as CSV string."""
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(['time_us', 'voltage_pct'])
    for sample in result.samples:
        writer.writerow([f"{sample.time:.6g}", f"{sample.voltage:.6g}"])

    return output.getvalue()


def export_json(result: WaveformResult) -> str:
    """Export samples and metrics as JSON string."""
    export_data = {
        'model': result.model.value,
        'time_span_us': result.time_span,
        'metrics': result.metrics.model_dump(),
        'samples': [s.model_dump() for s in result.samples],
        'generated_by': 'Impulse Engine',
    }
    return json.dumps(export_data, indent=2)
