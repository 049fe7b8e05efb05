import matplotlib.pyplot as plt
import numpy as np

import pysinenoise as psn

# Same octave count, different fall-offs and fresh draws from one generator
rng = np.random.default_rng(42)
fall_offs = [0.5, 0.8, 0.95, 0.98]
size = 200

fig, axes = plt.subplots(2, len(fall_offs), figsize=(4 * len(fall_offs), 8))

for col, fall_off in enumerate(fall_offs):
	field = psn.field.scale(psn.field.fractal_field(200, fall_off, rng=rng), 0.25)
	grid = psn.grid.sample_and_normalize(field, size, size, verbose=True)
	psn.misc.preview_grid(grid, "grayscale", ax=axes[0, col], title=f"fall-off {fall_off}")
	psn.misc.preview_grid(grid, "terracolor", ax=axes[1, col])

fig.tight_layout()
plt.show()
