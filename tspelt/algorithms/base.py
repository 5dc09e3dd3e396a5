"""Base classes for segmenters wrapping the change point estimators.

The segmenters follow the aeon ``BaseSegmenter`` API on top of
:class:`sklearn.base.BaseEstimator`: hyper-parameters are constructor
arguments (so ``get_params``/``set_params``/``clone`` work), capabilities are
declared through class ``_tags``, and inputs may be numpy arrays or pandas
objects.

Notes
-----
``axis`` gives the position of the time dimension of the input: ``axis=0``
for ``(n_timepoints, n_channels)`` and ``axis=1`` for
``(n_channels, n_timepoints)``. Inputs are converted to ``np.ndarray`` laid
out along the segmenter's own ``axis`` before reaching ``_fit``/``_predict``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Any, Dict, Iterable

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator
from sklearn.exceptions import NotFittedError

__all__ = ["BaseTaggedEstimator", "BaseSeriesEstimator", "BaseSegmenter"]

SERIES_INPUT_TYPES = (pd.Series, pd.DataFrame, np.ndarray)


# ---------------------------------------------------------------------------
# Base estimator hierarchy
# ---------------------------------------------------------------------------


class BaseTaggedEstimator(BaseEstimator, ABC):
	"""Clone/reset/tag functionality shared by all segmenters."""

	_tags: Dict[str, Any] = {
		"cant_pickle": False,
		"non_deterministic": False,
		"capability:missing_values": False,
	}

	def __init__(self) -> None:
		self.is_fitted = False
		super().__init__()

	@classmethod
	def get_class_tags(cls) -> Dict[str, Any]:
		"""Collect class tags, subclasses overriding their parents."""

		collected: Dict[str, Any] = {}
		for parent in reversed(cls.__mro__):
			collected.update(parent.__dict__.get("_tags", {}))
		return deepcopy(collected)

	def get_tag(
		self,
		tag_name: str,
		raise_error: bool = True,
		tag_value_default: Any | None = None,
	) -> Any:
		"""Return a single tag value."""

		tags = self.get_class_tags()
		if tag_name in tags:
			return tags[tag_name]
		if raise_error:
			raise ValueError(f"Tag with name {tag_name} could not be found.")
		return tag_value_default

	def reset(self, keep: str | Iterable[str] | None = None) -> "BaseTaggedEstimator":
		"""Drop fitted state, keeping constructor parameters and ``keep``."""

		params = self.get_params(deep=False)
		if keep is None:
			keep_set: set[str] = set()
		elif isinstance(keep, str):
			keep_set = {keep}
		else:
			keep_set = set(keep)

		for attr in [attr for attr in vars(self) if "__" not in attr]:
			if attr not in keep_set:
				delattr(self, attr)

		self.__init__(**params)
		return self

	def clone(self) -> "BaseTaggedEstimator":
		return type(self)(**self.get_params(deep=False))

	def _check_is_fitted(self) -> None:
		if not getattr(self, "is_fitted", False):
			raise NotFittedError(
				f"This instance of {self.__class__.__name__} has not been fitted yet;"
				" please call `fit` first."
			)


class BaseSeriesEstimator(BaseTaggedEstimator):
	"""Base class for single-series estimators with numpy/pandas support."""

	_tags: Dict[str, Any] = {
		"capability:univariate": True,
		"capability:multivariate": False,
	}

	def __init__(self, axis: int) -> None:
		if axis not in (0, 1):
			raise ValueError("axis should be 0 or 1")
		self.axis = axis
		self.metadata_: Dict[str, Any] = {}
		super().__init__()

	# ------------------------------------------------------------------
	# Data preparation helpers
	# ------------------------------------------------------------------

	def _preprocess_series(self, X: Any, axis: int, store_metadata: bool) -> np.ndarray:
		metadata = self._check_X(X, axis)
		if store_metadata:
			self.metadata_ = metadata
		return self._convert_X(X, axis)

	def _check_X(self, X: Any, axis: int) -> Dict[str, Any]:
		if axis not in (0, 1):
			raise ValueError(f"Input axis should be 0 or 1, saw {axis}")

		if isinstance(X, np.ndarray):
			if not (np.issubdtype(X.dtype, np.integer) or np.issubdtype(X.dtype, np.floating)):
				raise ValueError("dtype for np.ndarray must be float or int")
			missing = bool(np.isnan(X).any())
		elif isinstance(X, pd.Series):
			if not pd.api.types.is_numeric_dtype(X):
				raise ValueError("pd.Series dtype must be numeric")
			missing = bool(X.isna().any())
		elif isinstance(X, pd.DataFrame):
			if not all(pd.api.types.is_numeric_dtype(X[col]) for col in X.columns):
				raise ValueError("pd.DataFrame dtype must be numeric")
			missing = bool(X.isna().any().any())
		else:
			raise ValueError(
				f"Input type of X should be one of {SERIES_INPUT_TYPES}, saw {type(X)}"
			)

		if X.ndim > 2:
			raise ValueError("X must have at most 2 dimensions for multivariate data")
		n_channels = 1 if X.ndim == 1 else X.shape[0 if axis == 1 else 1]
		metadata = {
			"multivariate": n_channels > 1,
			"n_channels": n_channels,
			"missing_values": missing,
		}

		if missing and not self.get_tag("capability:missing_values"):
			raise ValueError(f"Missing values not supported by {self.__class__.__name__}")
		if metadata["multivariate"] and not self.get_tag("capability:multivariate"):
			raise ValueError(f"Multivariate data not supported by {self.__class__.__name__}")
		if not metadata["multivariate"] and not self.get_tag("capability:univariate"):
			raise ValueError(f"Univariate data not supported by {self.__class__.__name__}")
		return metadata

	def _convert_X(self, X: Any, axis: int) -> np.ndarray:
		if isinstance(X, (pd.Series, pd.DataFrame)):
			X = X.to_numpy()
		X = np.asarray(X, dtype=float)
		if X.ndim == 1:
			return X[np.newaxis, :] if self.axis == 1 else X[:, np.newaxis]
		if self.axis != axis:
			return X.T
		return X


class BaseSegmenter(BaseSeriesEstimator):
	"""Base class for segmentation algorithms, based on aeon's API."""

	_tags: Dict[str, Any] = {
		"fit_is_empty": True,
		"returns_dense": True,
	}

	def __init__(self, axis: int) -> None:
		super().__init__(axis=axis)

	# Public API -------------------------------------------------------

	def fit(self, X: Any, y: Any | None = None, axis: int | None = None) -> "BaseSegmenter":
		if self.get_tag("fit_is_empty"):
			self.is_fitted = True
			return self

		if axis is None:
			axis = self.axis
		# validate before dropping the previous fit
		metadata = self._check_X(X, axis)
		X_inner = self._convert_X(X, axis)
		self.reset()
		self.metadata_ = metadata
		self._fit(X=X_inner, y=y)
		self.is_fitted = True
		return self

	def predict(self, X: Any, axis: int | None = None):
		if not self.get_tag("fit_is_empty"):
			self._check_is_fitted()
		if axis is None:
			axis = self.axis
		X_inner = self._preprocess_series(X, axis, store_metadata=False)
		return self._predict(X_inner)

	def fit_predict(self, X: Any, y: Any | None = None, axis: int | None = None):
		self.fit(X, y, axis=axis)
		return self.predict(X, axis=axis)

	# Hooks for subclasses ---------------------------------------------

	def _fit(self, X: np.ndarray, y: Any | None):
		return self

	@abstractmethod
	def _predict(self, X: np.ndarray):
		...

	# Convenience converters -------------------------------------------

	@classmethod
	def to_classification(cls, change_points: list[int], length: int) -> np.ndarray:
		"""Mark each change point with ``1``, every other time point with ``0``."""

		labels = np.zeros(length, dtype=int)
		labels[change_points] = 1
		return labels

	@classmethod
	def to_clusters(cls, change_points: list[int], length: int) -> np.ndarray:
		"""Label each time point with the index of the segment it belongs to."""

		labels = np.zeros(length, dtype=int)
		for cp in change_points:
			labels[cp:] += 1
		return labels
