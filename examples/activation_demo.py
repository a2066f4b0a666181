"""Print each activation at z = 2."""

import nnfold.functions as F

print("sigmoid(2) =", F.sigmoid(2.0))
print("tanh(2) =", F.tanh(2.0))
print("relu(2) =", F.relu(2.0))
print("prelu(2) =", F.prelu(2.0, 0.1))
print("elu(2) =", F.elu(2.0, 0.1))
print("glu(2) =", F.glu(2.0))
print("swish(2) =", F.swish(2.0))
print("softplus(2) =", F.softplus(2.0, 0.1))
print("mish(2) =", F.mish(2.0))
