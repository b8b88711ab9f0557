"""
Binary heap primitives over float64 arrays.

Positions are 1-based: the parent of p is p//2, its children are 2p and 2p+1,
and position p is stored at index p-1. Every operation is written once against
a `better(a, b)` comparator; min and max heaps only differ in that comparator.
"""
import numpy as np

MIN, MAX = "min", "max"

if 1: # Order comparators
	def _lt(a, b): return a < b
	def _gt(a, b): return a > b
	_BETTER = {MIN: _lt, MAX: _gt}
	def _comparator(order):
		if order not in _BETTER: raise ValueError("order must be either 'min' or 'max'")
		return _BETTER[order]
	def _as_values(values, copy=False):
		x = np.array(values, dtype=np.float64) if copy else np.asarray(values, dtype=np.float64)
		if x.ndim == 0: x = x.reshape(1)
		if x.ndim != 1: raise ValueError("Expected a one-dimensional array of values")
		return x

if 1: # Sift primitives, no bounds checks
	def _siftup(x, pos, better):
		while pos > 1:
			par = pos >> 1
			# Parent is at least as good, we are done
			if not better(x[pos-1], x[par-1]): break
			x[par-1], x[pos-1] = x[pos-1], x[par-1]
			pos = par
	def _siftdown(x, pos, size, better):
		while True:
			lc = pos << 1
			# No children inside the logical size
			if lc > size: break
			rc = lc+1
			# Select child to use for sifting, ties go left
			prio_child = rc if rc <= size and better(x[rc-1], x[lc-1]) else lc
			# Child is not better than parent, we are done
			if not better(x[prio_child-1], x[pos-1]): break
			x[prio_child-1], x[pos-1] = x[pos-1], x[prio_child-1]
			pos = prio_child
	def _heapify(x, better):
		n = len(x)
		for pos in range(n >> 1, 0, -1): _siftdown(x, pos, n, better)
	def _replace_root(heap, value):
		x = heap.data.copy()
		root = float(x[0])
		x[0] = value
		_siftdown(x, 1, len(x), heap.better)
		return root, Heap(x, heap.order)

class Heap:
	"""A float64 array tagged with its order.

	Wrapping does not heapify, use `build` (or `minheap`/`maxheap`) for
	unordered data.
	"""
	def __init__(self, data=None, order=MIN):
		self.better = _comparator(order)
		self.order = order
		self.data = np.empty(0, dtype=np.float64) if data is None else _as_values(data)
	def peek(self):
		if len(self.data) == 0: raise IndexError("peek on empty heap")
		return float(self.data[0])
	def is_valid(self):
		n = len(self.data)
		if n < 2: return True
		pos = np.arange(2, n+1)
		return not np.any(self.better(self.data[pos-1], self.data[(pos >> 1)-1]))
	def copy(self): return Heap(self.data.copy(), self.order)
	def tolist(self): return self.data.tolist()
	def sift_up(self, pos): return sift_up(self, pos)
	def sift_down(self, pos, size=None): return sift_down(self, pos, size)
	def push(self, values): return push(self, values)
	def bounded_insert(self, value): return bounded_insert(self, value)
	def pop(self, k=1): return pop(self, k)
	def pushpop(self, value): return pushpop(self, value)
	def poppush(self, value): return poppush(self, value)
	def batch_pushpop(self, values): return batch_pushpop(self, values)
	def batch_poppush(self, values): return batch_poppush(self, values)
	def __len__(self): return len(self.data)
	def __getitem__(self, i): return self.data[i]
	def __iter__(self): return iter(self.data)
	def __repr__(self): return f"{self.order}heap({self.data.tolist()!r})"

def sift_up(heap, pos):
	"""Move the value at 1-based `pos` towards the root, in place on `heap.data`."""
	if pos < 1 or pos > len(heap.data): raise IndexError("Index out of bounds")
	_siftup(heap.data, pos, heap.better)
	return heap

def sift_down(heap, pos, size=None):
	"""Move the value at 1-based `pos` towards the leaves, in place on `heap.data`.

	Only positions up to `size` (default: the whole array) take part, so the
	tail of the buffer can hold values that are no longer in the heap.
	"""
	n = len(heap.data)
	if size is None: size = n
	if size < 0 or size > n: raise IndexError("Size out of bounds")
	if pos < 1 or pos > size: raise IndexError("Index out of bounds")
	_siftdown(heap.data, pos, size, heap.better)
	return heap

def build(values, order=MIN):
	"""Heapify a copy of `values` bottom-up in O(n)."""
	better = _comparator(order)
	x = _as_values(values, copy=True)
	_heapify(x, better)
	return Heap(x, order)

def minheap(values): return build(values, MIN)
def maxheap(values): return build(values, MAX)

def push(heap, values):
	"""Return a new heap holding `heap` plus `values`, inserted left to right."""
	values = _as_values(values)
	n = len(heap.data)
	x = np.concatenate((heap.data, values))
	# Sifting up never touches positions after the current one
	for pos in range(n+1, len(x)+1): _siftup(x, pos, heap.better)
	return Heap(x, heap.order)

def bounded_insert(heap, value):
	"""Replace the worst leaf with `value` if `value` is strictly better.

	Only the leaves n//2+1..n are scanned, so an interior value can be worse
	than the leaf that gets replaced. The size never changes and a rejected
	value returns `heap` itself.
	"""
	x, better = heap.data, heap.better
	n = len(x)
	if n == 0: return heap
	value = float(value)
	worst = first_leaf = (n >> 1)+1
	for pos in range(first_leaf+1, n+1):
		if better(x[worst-1], x[pos-1]): worst = pos
	if not better(value, x[worst-1]): return heap
	x = x.copy()
	x[worst-1] = value
	_siftup(x, worst, better)
	return Heap(x, heap.order)

def pop(heap, k=1):
	"""Extract the `k` best values, best first.

	`k` is clamped to [0, len(heap)]; with nothing to extract the input heap is
	returned as the residual. Otherwise one scratch copy holds both results:
	each extracted root is parked in the slot the shrinking heap gives up.
	"""
	n = len(heap.data)
	k = min(max(k, 0), n)
	if k == 0: return np.empty(0, dtype=np.float64), heap
	x = heap.data.copy()
	for size in range(n, n-k, -1):
		x[0], x[size-1] = x[size-1], x[0]
		_siftdown(x, 1, size-1, heap.better)
	return x[n-k:][::-1], Heap(x[:n-k], heap.order)

def pushpop(heap, value):
	"""Push `value` then pop the best value.

	When `value` would come straight back out the heap is returned untouched.
	"""
	value = float(value)
	if len(heap.data) == 0 or not heap.better(heap.data[0], value): return value, heap
	return _replace_root(heap, value)

def poppush(heap, value):
	"""Pop the best value then push `value`, whatever it is."""
	value = float(value)
	if len(heap.data) == 0: return value, heap
	return _replace_root(heap, value)

def batch_pushpop(heap, values):
	values = _as_values(values)
	n = len(heap.data)
	if n == 0: return heap
	x, better = heap.data.copy(), heap.better
	for v in values:
		if better(x[0], v):
			x[0] = v
			_siftdown(x, 1, n, better)
	return Heap(x, heap.order)

def batch_poppush(heap, values):
	values = _as_values(values)
	n = len(heap.data)
	if n == 0: return heap
	x, better = heap.data.copy(), heap.better
	for v in values:
		x[0] = v
		_siftdown(x, 1, n, better)
	return Heap(x, heap.order)

if __name__ == "__main__":
	rnd = np.random.sample(1000)
	np_sorted = np.sort(rnd)
	# Sort with minheap
	minheap_sorted, rest = pop(minheap(rnd), len(rnd))
	assert len(rest) == 0
	# Sort with maxheap
	maxheap_sorted, _ = pop(maxheap(rnd), len(rnd))
	# Sort with pushes
	h = Heap()
	for i,v in enumerate(rnd):
		h = push(h, v)
		assert h.peek() == np.min(rnd[:i+1])
	pushed_sorted, _ = pop(h, len(rnd))
	# Test
	assert np.all(minheap_sorted == np_sorted)
	assert np.all(maxheap_sorted == np_sorted[::-1])
	assert np.all(pushed_sorted == np_sorted)

	# Keep the ten largest values with a min heap
	top = batch_pushpop(minheap(rnd[:10]), rnd[10:])
	assert top.is_valid()
	assert np.all(np.sort(top.data) == np_sorted[-10:])
	# Keep the ten smallest values with a max heap
	bottom = maxheap(rnd[:10])
	for v in rnd[10:]: _, bottom = pushpop(bottom, v)
	assert np.all(np.sort(bottom.data) == np_sorted[:10])
