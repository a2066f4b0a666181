"""Print every loss for a fixed pair of sequences."""

import nnfold.functions as F

ground = [0.1, 1.0, 0.3, 0.5, 0.7]
predicted = [0.1, 0.3, 0.4, 0.1, 0.2]

print("L1 =", F.l1(ground, predicted))
print("L2 =", F.l2(ground, predicted))
print("Huber =", F.huber(ground, predicted, 0.2))
print("BCE =", F.bce(ground, predicted))
print("CE =", F.ce(ground, predicted))
print("softmax =", F.softmax(predicted))
print("KL =", F.kl(ground, predicted))
print("contrastive =", F.contrastive(True, ground, predicted, 2.0))
print("hinge =", F.hinge(ground, predicted))
print("Triplet Ranking =", F.triplet_ranking(predicted, ground, predicted, 0.2))
