"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample vector drawables

CLOSE_ICON_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="200dp"
    android:height="200dp"
    android:viewportWidth="1024"
    android:viewportHeight="1024">
  <path
      android:pathData="M512,62C264.5,62 62,264.5 62,512s202.5,450 450,450c247.5,0 450,-202.5 450,-450S759.5,62 512,62zM512,887C302,887 137,722 137,512S302,137 512,137 887,302 887,512 722,887 512,887zM699.5,324.5c-15,-15 -37.5,-15 -52.5,-0L512,459.5l-135,-135c-15,-15 -37.5,-15 -52.5,-0 -15,15 -15,37.5 0,52.5L459.5,512l-135,135c-15,15 -15,37.5 -0,52.5 15,15 37.5,15 52.5,0L512,564.5l135,135c15,15 37.5,15 52.5,0s15,-37.5 0,-52.5L564.5,512l135,-135C714.5,362 714.5,339.5 699.5,324.5z"
      android:fillColor="#272636"/>
</vector>'''

THREE_PATHS_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp"
    android:height="24dp"
    android:viewportWidth="24"
    android:viewportHeight="24">
  <path android:pathData="M0,0 L24,0 L24,24 L0,24 Z" android:fillColor="#FFFF0000"/>
  <path android:pathData="M4,4 L20,4 L20,20 L4,20 Z" android:fillColor="#8000FF00" android:fillType="evenOdd"/>
  <path
      android:pathData="M12,2 L22,12 L12,22 L2,12 Z"
      android:strokeColor="#0000FF"
      android:strokeWidth="2"
      android:strokeAlpha="0.5"/>
</vector>'''

SINGLE_QUOTED_XML = """<vector xmlns:android='http://schemas.android.com/apk/res/android'
    android:width = '48dp' android:height = '32dp'
    android:viewportWidth = '48' android:viewportHeight = '32'>
  <path android:pathData = 'M0,0 L48,32' android:strokeColor = '#FF1FA1FF' android:strokeWidth = '1.5'/>
</vector>"""

NO_SIZE_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="10"
    android:viewportHeight="20">
  <path android:pathData="M1,1 L9,19" android:fillColor="#000000"/>
</vector>'''

GRADIENT_FILL_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    xmlns:aapt="http://schemas.android.com/aapt"
    android:width="108dp"
    android:height="108dp"
    android:viewportWidth="108"
    android:viewportHeight="108">
  <path
      android:pathData="M31,63.928c0,0 6.4,-11 12.1,-13.1L72,78L31,78Z"
      android:fillColor="#00000000">
    <aapt:attr name="android:fillColor">
      <gradient
          android:startX="42.9"
          android:startY="49.6"
          android:endX="85.8"
          android:endY="92.4"
          android:type="linear">
        <item android:color="#FF1FA1FF" android:offset="0.0"/>
        <item android:color="#00000000" android:offset="1.0"/>
      </gradient>
    </aapt:attr>
  </path>
  <path
      android:pathData="M65.3,45.8 L67.6,41.8Z"
      android:strokeWidth="1"
      android:fillColor="#FFFFFF"
      android:strokeColor="#00000000"/>
</vector>'''

GRADIENT_STROKE_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    xmlns:aapt="http://schemas.android.com/aapt"
    android:viewportWidth="24"
    android:viewportHeight="24">
  <path android:pathData="M2,2 L22,22" android:strokeWidth="2">
    <aapt:attr name="android:strokeColor">
      <gradient android:startColor="#FF3366CC" android:endColor="#FF000000" android:type="linear"/>
    </aapt:attr>
  </path>
</vector>'''


@pytest.fixture
def close_icon_xml() -> str:
    return CLOSE_ICON_XML


@pytest.fixture
def three_paths_xml() -> str:
    return THREE_PATHS_XML


@pytest.fixture
def gradient_fill_xml() -> str:
    return GRADIENT_FILL_XML
