"""
给定一个整数数组 nums，返回一个新数组，将所有 0 移动到数组的末尾，同时保持非零元素的相对顺序。

不修改原数组。

示例 1:

输入: nums = [0,1,0,3,12]
输出: [1,3,12,0,0]
示例 2:

输入: nums = [0,0,1]
输出: [1,0,0]
"""
import logging
from typing import List

logger = logging.getLogger(__name__)


class Solution:
    def moveZerosToEnd(self, nums: List[int]) -> List[int]:
        """
        Return a new list, nums is left untouched.
        """
        if nums is None:
            raise ValueError("nums must not be None")

        length = len(nums)
        out = [0] * length
        nonZero = 0
        for n in nums:
            if n != 0:
                out[nonZero] = n
                nonZero += 1

        logger.debug("moved %d zeros behind %d numbers", length - nonZero, nonZero)
        return out


def moveZerosToEnd(nums: List[int]) -> List[int]:
    return Solution().moveZerosToEnd(nums)
