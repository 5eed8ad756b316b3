"""Example: two figures, formatted in the order they were created."""

import matplotlib.pyplot as plt
import numpy as np

import figure_format as ff

epochs = np.arange(1, 51)
rng = np.random.default_rng(42)
loss = 2.8 * np.exp(-0.08 * epochs) + 0.15 + rng.normal(0, 0.03, len(epochs))
val_loss = loss + 0.1 + rng.normal(0, 0.03, len(epochs))

fig1, ax = plt.subplots()
ax.plot(epochs, loss, label="train")
ax.plot(epochs, val_loss, label="validation")
ax.set_title("Training Loss")
ax.set_xlabel("Epoch")
ax.set_ylabel("Loss")
ax.legend()

fig2, (top, bottom) = plt.subplots(2, 1)
top.plot(epochs, np.gradient(loss))
top.set_ylabel("d loss")
bottom.plot(epochs, np.cumsum(loss))
bottom.set_xlabel("Epoch")
# Free text is classified from its alignment unless it carries a tag
ff.tag_role(fig2.text(0.5, 0.95, "Loss diagnostics", ha="center"), ff.Role.TITLE)

ff.figure_format()
plt.show()
