from numheap.heaps import (
	MIN, MAX, Heap,
	build, minheap, maxheap,
	push, bounded_insert, pop,
	pushpop, poppush, batch_pushpop, batch_poppush,
	sift_up, sift_down,
)

__version__ = "0.1.0"
