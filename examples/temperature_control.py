"""Example: dual-axis chart. Each axes starts its own color cycle."""

import matplotlib.pyplot as plt
import numpy as np

import figure_format as ff

t = np.linspace(0, 24, 200)
temp = 68 + 4 * np.sin(2 * np.pi * t / 24) + np.random.default_rng(7).normal(0, 0.3, len(t))
control = np.clip(72 - temp, 0, None) / 4

fig, ax1 = plt.subplots()
ax1.plot(t, temp, label="Temperature (°F)")
ax1.set_xlabel("Hour of Day")
ax1.set_ylabel("Temperature (°F)")
ax1.set_title("Temperature Control System")

ax2 = ax1.twinx()
ax2.plot(t, control, label="Heater Output")
ax2.set_ylabel("Heater Output (0–1)")

fig.legend(loc="upper right")

# A custom palette; names must exist in the color table
style = ff.Style.from_theme(["forest green", "goldenrod"], ["-", "--"])
ff.format_figures(style=style)
plt.show()
