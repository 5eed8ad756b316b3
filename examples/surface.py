"""Example: 3D surface and line; labels are found on a box-less axes."""

import matplotlib.pyplot as plt
import numpy as np

import figure_format as ff

x = np.linspace(-2, 2, 40)
xx, yy = np.meshgrid(x, x)

fig = plt.figure()
ax = fig.add_subplot(projection="3d")
ax.plot_surface(xx, yy, np.exp(-(xx**2 + yy**2)), cmap="viridis")
ax.plot(x, np.zeros_like(x), np.exp(-(x**2)))
ax.set_xlabel("x")
ax.set_ylabel("y")
ax.set_zlabel("z")
ax.set_title("Gaussian Bump")

try:
    ff.Style.from_theme(["not-a-color"])
except ff.UnknownColorError as exc:
    print(f"{exc.name!r} is not a color; try one of {exc.valid_names[:5]} ...")

ff.figure_format()
plt.show()
