"""Plot every activation over [-4, 4] using matplotlib."""

import matplotlib.pyplot as plt
import numpy as np

import nnfold.functions as F
from nnfold.functions._reduction import apply

z = np.linspace(-4.0, 4.0, 201)

curves = {
    "sigmoid": F.sigmoid,
    "tanh": F.tanh,
    "relu": F.relu,
    "prelu (alpha=0.1)": lambda v: F.prelu(v, 0.1),
    "elu (alpha=1)": lambda v: F.elu(v, 1.0),
    "swish": F.swish,
    "softplus (beta=1)": lambda v: F.softplus(v, 1.0),
    "mish": F.mish,
}

fig, axes = plt.subplots(2, 4, figsize=(12, 6), sharex=True)
axes = axes.ravel()

for ax, (name, fn) in zip(axes, curves.items()):
    ax.plot(z, apply(fn, z))
    ax.axhline(0.0, color="gray", linewidth=0.5)
    ax.set_title(name)

plt.tight_layout()
plt.show()
