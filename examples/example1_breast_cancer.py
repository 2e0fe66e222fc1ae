"""
Example 1 – Breast Cancer (Binary Classification)
==================================================
Forward selection and backward elimination on the first 10 features of
the Wisconsin Breast Cancer data, using the sklearn-style estimator.

Dataset : Wisconsin Breast Cancer (10 of 30 features, 2 classes, 569 samples)
Score   : leave-one-out 1-nearest-neighbor accuracy
"""

from sklearn.datasets import load_breast_cancer
from sklearn.model_selection import train_test_split
from sklearn.neighbors import KNeighborsClassifier
from sklearn.metrics import accuracy_score
from sklearn.preprocessing import StandardScaler

from nn_feature_select import NearestNeighborFeatureSelector
from nn_feature_select.plot import plot_search_trace

# ---------------------------------------------------------------------------
# 1. Load data
# ---------------------------------------------------------------------------
data = load_breast_cancer()
X, y = data.data[:, :10], data.target
feature_names = data.feature_names[:10].tolist()

X_train, X_test, y_train, y_test = train_test_split(
    X, y, test_size=0.2, random_state=42, stratify=y,
)

print(f"Dataset: {X.shape[0]} samples, {X.shape[1]} features, 2 classes")

# ---------------------------------------------------------------------------
# 2. Run both search directions
# ---------------------------------------------------------------------------
selectors = {}
for direction in ("forward", "backward"):
    selector = NearestNeighborFeatureSelector(direction=direction, verbose=1)
    selector.fit(X_train, y_train)
    print()
    print(selector.summary())
    print("  names:", list(selector.get_feature_names_out(feature_names)))
    print()
    selectors[direction] = selector

# ---------------------------------------------------------------------------
# 3. Evaluate on held-out test set
# ---------------------------------------------------------------------------
scaler = StandardScaler().fit(X_train)
for direction, selector in selectors.items():
    X_train_red = selector.transform(scaler.transform(X_train))
    X_test_red  = selector.transform(scaler.transform(X_test))
    clf = KNeighborsClassifier(n_neighbors=1).fit(X_train_red, y_train)
    acc = accuracy_score(y_test, clf.predict(X_test_red))
    print(f"Test accuracy (1-NN, {direction} subset): {acc:.4f}")

# ---------------------------------------------------------------------------
# 4. Visualise
# ---------------------------------------------------------------------------
for direction, selector in selectors.items():
    plot_search_trace(
        selector.search_,
        title=f"Breast Cancer – {direction} search",
        save_path=f"example1_{direction}_trace.png",
    )

print("Plots saved: example1_forward_trace.png, example1_backward_trace.png")
