"""Example: nine lines on one axes, so colors and dashes wrap around."""

import matplotlib.pyplot as plt
import numpy as np

import figure_format as ff

hours = np.arange(0, 11)

fig, ax = plt.subplots()
for k in range(1, 10):
    ax.plot(hours, 2.5 * hours + k, label=f"Team {k}")
ax.set_title("Effort Comparison")
ax.set_xlabel("Hours Invested")
ax.set_ylabel("Features Shipped")
ax.legend()

ff.figure_format()
plt.show()
